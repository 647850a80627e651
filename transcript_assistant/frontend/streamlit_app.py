"""
Main Streamlit application for the Media Transcript Assistant.
"""

import os
import streamlit as st
from dotenv import load_dotenv
from transcript_assistant.config import config
from transcript_assistant.frontend.api_client import ApiClient
from transcript_assistant.frontend.components import (
    header, sidebar, apply_theme, youtube_input, upload_input,
    loading_spinner, display_status, render_answer, export_controls,
    display_transcript_copy
)


load_dotenv()

DEFAULT_API_URL = os.getenv("API_URL", config.PUBLIC_URL)


def init_session_state():
    """Initialize session state variables."""
    defaults = {
        "theme": "dark",
        "transcript": "",
        "answer": "",
        "status": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def get_client() -> ApiClient:
    """Return an API client for the URL currently set in the sidebar."""
    api_url = st.session_state.get("api_url") or DEFAULT_API_URL
    client = st.session_state.get("api_client")
    if client is None or client.base_url != api_url:
        client = ApiClient(api_url)
        st.session_state.api_client = client
    return client


def store_transcription(result: dict):
    """Put a transcription result into the workspace."""
    st.session_state.transcript = result.get("text") or ""
    # The text area keeps its own state, refresh it too
    st.session_state.transcript_editor = st.session_state.transcript
    st.session_state.status = ("success", "Transcription complete. Open the Workspace tab.")


def start_transcription(message: str, call):
    """Run a transcription call, updating the workspace and status."""
    st.session_state.answer = ""
    st.session_state.transcript = ""
    try:
        with loading_spinner(message):
            result = call()
        store_transcription(result)
    except Exception as e:
        st.session_state.status = ("error", f"Error: {str(e)}")
    st.rerun()


def youtube_tab():
    """Transcribe from a YouTube link."""
    st.markdown("### Transcribe a YouTube video")
    url = youtube_input()
    if url:
        client = get_client()
        start_transcription("Downloading video and transcribing...",
                            lambda: client.transcribe_youtube(url))


def upload_tab():
    """Transcribe an uploaded file."""
    st.markdown("### Transcribe an audio or video file")
    uploaded = upload_input()
    if uploaded is not None:
        client = get_client()
        start_transcription(
            "Uploading file and transcribing...",
            lambda: client.transcribe_file(uploaded.name, uploaded.getvalue(), uploaded.type),
        )


def workspace_tab():
    """Show the transcript, the QA box and the export controls."""
    client = get_client()

    st.markdown("### Transcript")
    if "transcript_editor" not in st.session_state:
        st.session_state.transcript_editor = st.session_state.transcript
    transcript = st.text_area("Transcript", key="transcript_editor", height=300,
                              label_visibility="collapsed")
    st.session_state.transcript = transcript

    if transcript.strip():
        display_transcript_copy(transcript.strip())
        export_controls("transcript", transcript.strip(), "transcript",
                        client.export, key="transcript")

    st.markdown("### Ask a question")
    question = st.text_input("Question", placeholder="What are the main takeaways?")
    if st.button("Ask", key="ask_btn"):
        if not transcript.strip():
            st.warning("No transcript available. Transcribe first.")
        elif not question.strip():
            st.warning("Please enter a question.")
        else:
            with loading_spinner("Answering..."):
                try:
                    st.session_state.answer = client.ask_question(question.strip(), transcript.strip())
                except Exception as e:
                    st.session_state.answer = ""
                    st.error(f"Error: {str(e)}")

    if st.session_state.answer:
        st.markdown("### Answer")
        render_answer(st.session_state.answer)
        export_controls("answer", st.session_state.answer.strip(), "answer",
                        client.export, key="answer")


def main():
    """Main application entry point."""
    header()
    init_session_state()
    sidebar(DEFAULT_API_URL)
    apply_theme(st.session_state.theme)

    display_status()

    youtube, upload, workspace = st.tabs(["YouTube", "Upload", "Workspace"])
    with youtube:
        youtube_tab()
    with upload:
        upload_tab()
    with workspace:
        workspace_tab()


if __name__ == "__main__":
    main()
