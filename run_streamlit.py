"""
Start the Streamlit front end against a running API server.
"""

import os
import argparse
import subprocess
import sys
from pathlib import Path

from transcript_assistant.config import config
from transcript_assistant.utils.logger import logging


STREAMLIT_APP = Path(__file__).resolve().parent / "transcript_assistant" / "frontend" / "streamlit_app.py"


def build_command(port: int, headless: bool = True) -> list:
    """Command line for `streamlit run`, using the current interpreter."""
    return [
        sys.executable, "-m", "streamlit", "run", str(STREAMLIT_APP),
        "--server.port", str(port),
        "--server.headless", str(headless).lower(),
        "--browser.gatherUsageStats", "false",
    ]


def main(argv=None):
    parser = argparse.ArgumentParser(description=f"{config.APP_NAME} web interface")
    parser.add_argument("--port", type=int, default=8501, help="Port for the Streamlit server")
    parser.add_argument("--api-url", default=os.getenv("API_URL", config.PUBLIC_URL),
                        help="Base URL of the API server (env API_URL, then PUBLIC_URL)")
    parser.add_argument("--open-browser", action="store_true", help="Open a browser tab on start")
    args = parser.parse_args(argv)

    env = os.environ.copy()
    env["API_URL"] = args.api_url
    # streamlit runs the app as a script, so the package must be importable from the project root
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(STREAMLIT_APP.parents[2]), env.get("PYTHONPATH")) if p
    )

    logging.info(f"Starting web interface on port {args.port}, API at {args.api_url}")

    try:
        subprocess.run(build_command(args.port, headless=not args.open_browser), env=env, check=True)
    except KeyboardInterrupt:
        logging.info("Web interface stopped")
    except subprocess.CalledProcessError as e:
        logging.error(f"Streamlit exited with status {e.returncode}")
        sys.exit(e.returncode)


if __name__ == "__main__":
    main()
