"""Shared test configuration."""

import os

# Settings are read at import time; never call the real Gemini API from tests
os.environ["GEMINI_API_KEY"] = ""
