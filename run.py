#!/usr/bin/env python3
"""Run the forecast API, or the Streamlit dashboard with `python run.py dashboard`."""

import subprocess
import sys
from pathlib import Path

import uvicorn

from settings import API_HOST, API_PORT
from settings.logging import setup_logging
from web.api.app import create_app

if __name__ == "__main__":
    if sys.argv[1:] == ["dashboard"]:
        app = Path(__file__).parent / "web" / "streamlit" / "app.py"
        subprocess.run([sys.executable, "-m", "streamlit", "run", str(app)])
    else:
        setup_logging(to_file=True)
        # keep the loguru intercept installed by setup_logging
        uvicorn.run(create_app(), host=API_HOST, port=API_PORT, log_config=None)
