"""Filesystem locations used by the reminder sync."""

from pathlib import Path

# src/paths.py -> repository root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Optional dotenv file holding TODOIST_* settings
ENV_FILE = PROJECT_ROOT / ".env"
