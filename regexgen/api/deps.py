"""FastAPI dependencies for dependency injection.

Provides the component factory bound to the application's settings.
"""

from fastapi import Request

from regexgen.core.factory import ComponentFactory


def get_component_factory(request: Request) -> ComponentFactory:
    """Dependency returning the factory created for this application.

    Args:
        request: The incoming request.

    Returns:
        The application's ComponentFactory.
    """
    return request.app.state.factory
