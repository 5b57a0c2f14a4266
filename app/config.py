import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_PORT = 5001
DEFAULT_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class Settings:
    """Process configuration, read once at startup."""
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def load_settings() -> Settings:
    # The API key is not checked here; a missing key fails on the first model call
    return Settings(
        api_key=os.environ.get("OPENAI_API_KEY"),
        model=os.environ.get("OPENAI_MODEL", DEFAULT_MODEL),
        port=int(os.environ.get("PORT", DEFAULT_PORT)),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
