import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from contact_form.presenter import DEFAULT_TITLE

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FormConfig(BaseModel):
    title: str = DEFAULT_TITLE
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls) -> "FormConfig":
        return cls(
            title=os.getenv("FORM_TITLE", DEFAULT_TITLE),
            log_level=os.getenv("FORM_LOG_LEVEL", "WARNING"),
        )
