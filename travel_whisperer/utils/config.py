import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

# load .env located at the project root (next to pyproject.toml)
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DOTENV_PATH = os.path.join(BASE_DIR, ".env")
load_dotenv(dotenv_path=DOTENV_PATH)

DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1"
DEFAULT_MODEL = "google/gemini-2.5-flash"


class Settings(BaseModel):
    """Process configuration handed to the handlers and the inference client."""
    model_config = ConfigDict(frozen=True)

    # AI gateway
    api_key: Optional[str] = None
    gateway_url: str = DEFAULT_GATEWAY_URL
    model: str = DEFAULT_MODEL

    # Server
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000


def load_settings() -> Settings:
    return Settings(
        api_key=os.getenv("AI_GATEWAY_API_KEY") or None,
        gateway_url=os.getenv("AI_GATEWAY_URL", DEFAULT_GATEWAY_URL),
        model=os.getenv("AI_MODEL", DEFAULT_MODEL),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


@lru_cache()
def get_settings() -> Settings:
    return load_settings()
