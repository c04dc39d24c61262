"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

# Force reload of environment variables
load_dotenv(override=True)

# Directory Settings
DATA_DIR = os.getenv("VIDEOPLAYER_DATA_DIR", "data")
CATALOG_FILE = os.getenv("VIDEOPLAYER_CATALOG", os.path.join(DATA_DIR, "videos.txt"))

# Logging Settings
LOG_LEVEL = os.getenv("VIDEOPLAYER_LOG_LEVEL", "WARNING")

# Session Settings
NO_REASON = "Not supplied"
EXIT_COMMAND = "EXIT"
PROMPT = "VideoPlayer> "
