"""Configuration for periodic notes."""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from periodic_notes.constants import DEFAULT_CALENDARSET_ID, SETTINGS_FILENAME


class NotesConfig(BaseModel):
    """Periodic notes configuration with Pydantic validation."""

    # Storage paths
    settings_file: Path = Field(default=Path("data") / SETTINGS_FILENAME)
    log_dir: Path = Field(default=Path("logs"))

    # File naming
    log_filename: str = Field(default="periodic_notes.log")

    # Calendar sets
    default_calendar_set: str = Field(default=DEFAULT_CALENDARSET_ID, min_length=1)

    @classmethod
    def from_env(cls) -> "NotesConfig":
        """Load configuration from environment variables and .env file."""
        # Search from the working directory, like the CLI config command
        load_dotenv(find_dotenv(usecwd=True))

        # Build config dict from environment
        config_dict = {}

        # Storage paths
        if "PERIODIC_NOTES_SETTINGS_FILE" in os.environ:
            config_dict["settings_file"] = Path(
                os.environ["PERIODIC_NOTES_SETTINGS_FILE"]
            )
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])

        # File naming
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Calendar sets
        default_set = os.environ.get("DEFAULT_CALENDAR_SET", "").strip()
        if default_set:
            config_dict["default_calendar_set"] = default_set

        return cls(**config_dict)
