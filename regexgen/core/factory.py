"""Component Factory for strategy instantiation.

The Factory Pattern allows the application to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from regexgen.core.config import Settings, get_settings
from regexgen.interfaces.deriver import BasePatternDeriver
from regexgen.interfaces.renderer import BaseArtifactRenderer
from regexgen.strategies.derivers import ContextWindowDeriver
from regexgen.strategies.renderers import (
    GroovyScriptRenderer,
    JMeterExtractorRenderer,
    MatchReportRenderer,
)

logger = logging.getLogger(__name__)

RENDERER_TYPES = ("jmeter", "groovy", "test")


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings())

        deriver = factory.get_deriver()
        result = deriver.derive(source, target)

        for renderer in factory.get_renderers():
            print(renderer.render(result, request).content)
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._deriver_cache: BasePatternDeriver | None = None
        self._renderer_cache: dict[str, BaseArtifactRenderer] = {}

    def get_deriver(
        self,
        deriver_type: str | None = None,
        context_limit: int | None = None,
    ) -> BasePatternDeriver:
        """Get a deriver instance based on the specified type.

        Only the default configuration is cached; explicit overrides build a
        fresh instance.

        Args:
            deriver_type: The deriver type to instantiate. If None, uses settings.
            context_limit: Context length override. If None, uses settings.

        Returns:
            A BasePatternDeriver implementation instance.

        Raises:
            ValueError: If the deriver type is unknown.
        """
        use_cache = deriver_type is None and context_limit is None
        if use_cache and self._deriver_cache is not None:
            return self._deriver_cache

        deriver_type = deriver_type or self._settings.deriver_type
        context_limit = context_limit or self._settings.context_limit

        logger.debug(f"Instantiating deriver: {deriver_type} (context_limit={context_limit})")

        match deriver_type:
            case "context_window":
                deriver = ContextWindowDeriver(context_limit=context_limit)
            case _:
                raise ValueError(
                    f"Unknown deriver type: {deriver_type}. "
                    f"Valid options: 'context_window'"
                )

        if use_cache:
            self._deriver_cache = deriver
        return deriver

    def get_renderer(self, renderer_type: str) -> BaseArtifactRenderer:
        """Get a renderer instance for an artifact format.

        Args:
            renderer_type: One of 'jmeter', 'groovy' or 'test'.

        Returns:
            A BaseArtifactRenderer implementation instance.

        Raises:
            ValueError: If the renderer type is unknown.
        """
        if renderer_type not in self._renderer_cache:
            logger.debug(f"Instantiating renderer: {renderer_type}")

            match renderer_type:
                case "jmeter":
                    renderer = JMeterExtractorRenderer(
                        escape_xml=self._settings.jmeter_escape_xml,
                    )
                case "groovy":
                    renderer = GroovyScriptRenderer()
                case "test":
                    renderer = MatchReportRenderer()
                case _:
                    raise ValueError(
                        f"Unknown renderer type: {renderer_type}. "
                        f"Valid options: {', '.join(repr(t) for t in RENDERER_TYPES)}"
                    )

            self._renderer_cache[renderer_type] = renderer

        return self._renderer_cache[renderer_type]

    def get_renderers(self) -> list[BaseArtifactRenderer]:
        """Get every available renderer, in display order."""
        return [self.get_renderer(renderer_type) for renderer_type in RENDERER_TYPES]

