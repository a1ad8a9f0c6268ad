"""fileshim settings with environment variable support."""

import os
from pathlib import Path

# Load .env file from project root
from dotenv import load_dotenv

# Find .env file - check current dir and parent dirs
def _find_env_file() -> Path | None:
    """Find .env file in current or parent directories."""
    current = Path.cwd()
    for _ in range(5):  # Check up to 5 levels
        env_file = current / ".env"
        if env_file.exists():
            return env_file
        current = current.parent
    return None

env_file = _find_env_file()
if env_file:
    load_dotenv(env_file)  # Existing process env wins over .env

from pydantic import BaseModel


class TempSettings(BaseModel):
    """Temp directory and temp file settings."""

    # Name of the variable that overrides the temp directory. The variable
    # itself is read on every call, not here.
    env_var: str = os.getenv("FILESHIM__TMP_DIR_VAR", "FILESHIM__TMP_DIR")
    prefix: str = os.getenv("FILESHIM__TEMP_PREFIX", "wt")
    posix_default: str = os.getenv("FILESHIM__POSIX_TMP_DIR", "/tmp")


class Settings(BaseModel):
    """Library settings."""

    temp: TempSettings = TempSettings()


settings = Settings()
