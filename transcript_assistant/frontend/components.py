"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Callable, Optional

from transcript_assistant.utils.helpers import markdown_to_html


EXPORT_FORMATS = ["txt", "pdf", "docx", "csv", "json"]

EXPORT_MIME_TYPES = {
    "txt": "text/plain",
    "json": "application/json",
    "csv": "text/csv",
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

LIGHT_THEME_CSS = """
<style>
.stApp { background-color: #f7f7fb; color: #1c1c28; }
.stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label { color: #1c1c28; }
.answer-card { background: #ffffff; border: 1px solid #dcdce6; }
</style>
"""

DARK_THEME_CSS = """
<style>
.stApp { background-color: #0f1117; color: #e6e6f0; }
.answer-card { background: #161a23; border: 1px solid #2a2f3d; }
</style>
"""

ANSWER_CARD_CSS = """
<style>
.answer-card { border-radius: 8px; padding: 1rem 1.25rem; }
.answer-card ul, .answer-card ol { margin: 0 0 0 1.25rem; padding: 0; }
</style>
"""


def header():
    """Display the application header."""
    st.set_page_config(
        page_title="Media Transcript Assistant",
        page_icon="🎙️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    st.title("🎙️ Media Transcript Assistant")
    st.markdown("""
    Transcribe a YouTube video or your own recording, ask questions about it, and export the results.
    """)
    st.divider()


def apply_theme(mode: str):
    """Inject the CSS for the selected theme ('light' or 'dark')."""
    css = LIGHT_THEME_CSS if mode == "light" else DARK_THEME_CSS
    st.markdown(css + ANSWER_CARD_CSS, unsafe_allow_html=True)


def sidebar(default_api_url: str):
    """Display the sidebar with settings and the theme toggle."""
    with st.sidebar:
        st.title("Transcript Assistant")

        st.markdown("## About")
        st.info("""
        - Transcribe YouTube links or uploaded audio/video
        - Ask questions answered from the transcript only
        - Export as TXT, PDF, DOCX, CSV or JSON
        """)

        st.markdown("## Settings")
        st.text_input("API URL", value=default_api_url, key="api_url")

        next_theme = "dark" if st.session_state.get("theme") == "light" else "light"
        if st.button(f"Switch to {next_theme} theme", key="theme_toggle"):
            st.session_state.theme = next_theme
            st.rerun()


def loading_spinner(message: str = "Processing..."):
    """
    Display a loading spinner with a message.

    Args:
        message: Message to display with the spinner
    """
    return st.spinner(message)


def display_error(message: str):
    """
    Display an error message.

    Args:
        message: Error message to display
    """
    st.error(message)


def display_success(message: str):
    """
    Display a success message.

    Args:
        message: Success message to display
    """
    st.success(message)


def display_status():
    """Show the last status message, if any."""
    status = st.session_state.get("status")
    if not status:
        return
    kind, message = status
    if kind == "error":
        display_error(message)
    elif kind == "success":
        display_success(message)
    else:
        st.info(message)


def youtube_input() -> Optional[str]:
    """
    Display a YouTube URL input form.

    Returns:
        The entered YouTube URL when submitted, otherwise None
    """
    with st.form(key="youtube_form"):
        url = st.text_input(
            "YouTube URL",
            placeholder="https://www.youtube.com/watch?v=VIDEO_ID",
        )
        submit = st.form_submit_button("Transcribe")

    if submit:
        if not url.strip():
            st.warning("Please paste a YouTube URL.")
            return None
        return url.strip()
    return None


def upload_input():
    """
    Display an audio/video uploader.

    Returns:
        The uploaded file when submitted, otherwise None
    """
    with st.form(key="upload_form"):
        uploaded = st.file_uploader(
            "Audio or video file",
            type=["wav", "mp3", "m4a", "mp4", "webm", "ogg", "flac", "mov", "mkv"],
        )
        submit = st.form_submit_button("Upload & Transcribe")

    if submit:
        if uploaded is None:
            st.warning("Please choose an audio or video file.")
            return None
        return uploaded
    return None


def render_answer(answer: str):
    """Render a markdown answer as HTML inside a card."""
    html = markdown_to_html(answer or "(No answer)")
    st.markdown(f'<div class="answer-card">{html}</div>', unsafe_allow_html=True)


def export_controls(label: str, content: str, basename: str, export_callback: Callable, key: str):
    """
    Display a format picker and a download button for some text.

    Args:
        label: Name shown on the buttons ('transcript' or 'answer')
        content: Text to export
        basename: Download file name without extension
        export_callback: Function (format, content, basename) -> bytes
        key: Unique widget key prefix
    """
    fmt = st.selectbox(f"Export {label} as", EXPORT_FORMATS, key=f"{key}_format")
    cache_key = f"{key}_export"

    if st.button(f"Prepare {label} download", key=f"{key}_prepare", disabled=not content.strip()):
        with loading_spinner(f"Exporting {label}..."):
            try:
                st.session_state[cache_key] = (fmt, content, export_callback(fmt, content, basename))
            except Exception as e:
                display_error(f"Export failed: {str(e)}")

    cached = st.session_state.get(cache_key)
    if cached and cached[0] == fmt and cached[1] == content:
        st.download_button(
            f"Download {label}.{fmt}",
            data=cached[2],
            file_name=f"{basename}.{fmt}",
            mime=EXPORT_MIME_TYPES[fmt],
            key=f"{key}_download",
        )


def display_transcript_copy(text: str):
    """Display the transcript in a code block, which has a copy button."""
    with st.expander("Copy transcript"):
        st.code(text, language=None)
        st.caption(f"{len(text)} characters")
