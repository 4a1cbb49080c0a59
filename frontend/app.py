"""Streamlit frontend for the Regex Extractor Generator.

Provides a UI for deriving an extraction pattern from a sample response
and copying it as a JMeter extractor or a Groovy script.
"""

import logging
import os
from typing import Any

import httpx
import streamlit as st
from typing_extensions import TypedDict

# Configuration
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")

# Page config
st.set_page_config(
    page_title="Regex Pattern Generator",
    page_icon="🪄",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# =============================================================================
# Type Definitions
# =============================================================================


class Artifacts(TypedDict):
    """Rendered artifacts returned by the API."""
    jmeter: str
    groovy: str
    test: str


class GenerationResult(TypedDict):
    """Result from pattern generation."""
    pattern: str
    matches: list[str]
    match_count: int
    context_limit: int
    artifacts: Artifacts
    generated_at: str


VIEWS = {
    "regex": "Regex Pattern",
    "jmeter": "JMeter Config",
    "groovy": "Groovy Script",
    "test": "Test Results",
}


# =============================================================================
# API Client
# =============================================================================


class RegexAPIClient:
    """API client for the regex generation endpoints."""

    def __init__(self, base_url: str):
        """Initialize the API client.

        Args:
            base_url: Base URL of the API.
        """
        self.base_url = base_url.rstrip("/")

    def health_check(self) -> bool:
        """Check if the API is healthy.

        Returns:
            True if API is healthy, False otherwise.
        """
        try:
            response = httpx.get(f"{self.base_url}/health", timeout=5.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    def generate(
        self,
        source: str,
        target: str,
        annotation: str | None = None,
    ) -> GenerationResult | None:
        """Derive a pattern for target within source.

        Rejections are shown to the user and None is returned, so the caller
        keeps whatever result it already displays.

        Args:
            source: Sample text.
            target: Value to extract.
            annotation: Optional custom Groovy logic note.

        Returns:
            GenerationResult, or None if generation failed.
        """
        payload: dict[str, Any] = {"source": source, "target": target}
        if annotation:
            payload["annotation"] = annotation

        try:
            with st.spinner("Generating pattern..."):
                response = httpx.post(f"{self.base_url}/regex/generate", json=payload, timeout=10.0)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Generation failed: {e.response.status_code} - {e.response.text}")
            render_api_error(e.response)
            return None
        except httpx.HTTPError as e:
            logger.error(f"Generation error: {e}")
            st.error(f"Generation error: {e}")
            return None


def render_api_error(response: httpx.Response) -> None:
    """Show an API error response with its title, when it has one."""
    try:
        body = response.json()
    except ValueError:
        st.error(f"Request failed: {response.status_code}")
        return

    title = (body.get("extra") or {}).get("title") or "Request Failed"
    st.error(f"**{title}**: {body.get('detail', response.status_code)}")


# =============================================================================
# UI Components
# =============================================================================


def render_sidebar(client: RegexAPIClient) -> None:
    """Render the sidebar with connection status.

    Args:
        client: The API client instance.
    """
    with st.sidebar:
        st.title("🪄 Regex Generator")

        st.divider()

        if client.health_check():
            st.success("✅ API Connected")
        else:
            st.error("❌ API Disconnected")
            st.info(f"API URL: {API_BASE_URL}")

        st.divider()
        st.caption(f"API: `{API_BASE_URL}`")


def render_input_section(client: RegexAPIClient) -> None:
    """Render the input form and run generation on submit.

    Args:
        client: The API client instance.
    """
    st.subheader("🪄 Input Configuration")

    col1, col2 = st.columns(2)

    with col1:
        source = st.text_area(
            "Source String",
            placeholder="Paste your source string here...",
            height=160,
        )

    with col2:
        target = st.text_input(
            "Target String to Extract",
            placeholder="Enter the string you want to extract",
        )

    annotation = st.text_input(
        "Custom Groovy Logic (Optional)",
        placeholder="e.g., Convert to uppercase, validate format, etc.",
    )

    generate = st.button(
        "Generate Regex Pattern",
        type="primary",
        use_container_width=True,
        disabled=not source or not target,
    )

    if generate:
        result = client.generate(source, target, annotation or None)
        if result:
            st.session_state.result = result
            st.toast(f"Pattern generated successfully with {result['match_count']} match(es)")


def render_artifact(label: str, content: str, language: str, filename: str) -> None:
    """Render one artifact with copy (code block) and download controls."""
    st.write(f"**{label}**")
    st.code(content, language=language)
    st.download_button(
        "Download",
        data=content,
        file_name=filename,
        mime="text/plain",
        key=f"download_{filename}",
    )


def render_results(result: GenerationResult) -> None:
    """Render the results card for the current result.

    Args:
        result: The most recent generation result.
    """
    st.subheader("🧪 Generated Results")

    view = st.selectbox(
        "View",
        options=list(VIEWS),
        format_func=VIEWS.get,
        key="selected_view",
        label_visibility="collapsed",
    )

    artifacts = result["artifacts"]

    match view:
        case "regex":
            render_artifact("Generated Regex Pattern", result["pattern"], "text", "pattern.txt")
        case "jmeter":
            render_artifact(
                "JMeter Regular Expression Extractor XML", artifacts["jmeter"], "xml", "extractor.xml"
            )
        case "groovy":
            render_artifact("Groovy Script", artifacts["groovy"], "groovy", "extract.groovy")
        case "test":
            render_artifact("Pattern Test Results", artifacts["test"], "text", "matches.txt")


def render_usage_guide() -> None:
    """Render usage instructions for each artifact."""
    st.subheader("📘 Usage Guide")

    col1, col2, col3 = st.columns(3)

    with col1:
        st.markdown("""
        **JMeter Setup**
        1. Add Regular Expression Extractor to your sampler
        2. Paste the generated XML configuration
        3. Use `${extractedValue}` in subsequent requests
        """)

    with col2:
        st.markdown("""
        **Groovy Processing**
        1. Add JSR223 PostProcessor
        2. Set Language to Groovy
        3. Paste the generated script
        4. Customize logic as needed
        """)

    with col3:
        st.markdown("""
        **Pattern Testing**
        1. Test your pattern in the Test Results view
        2. Verify matches are correct
        3. Adjust source/target if needed
        4. Re-generate for optimization
        """)


def init_session_state() -> None:
    """Initialize session state variables."""
    if "result" not in st.session_state:
        st.session_state.result = None


# =============================================================================
# Main App
# =============================================================================


def main() -> None:
    """Main application entry point."""
    init_session_state()

    client = RegexAPIClient(API_BASE_URL)

    render_sidebar(client)

    st.title("Regex Pattern Generator")
    st.caption("Generate regex patterns for JMeter Regular Expression Extractor and Groovy scripts")

    render_input_section(client)

    if st.session_state.result:
        st.divider()
        render_results(st.session_state.result)

    st.divider()
    render_usage_guide()


if __name__ == "__main__":
    main()
