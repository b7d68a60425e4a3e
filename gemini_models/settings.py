import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"


class Settings(BaseModel):
    api_key: Optional[str] = None
    base_url: str = Field(DEFAULT_BASE_URL, min_length=1)

    @classmethod
    def from_env(cls) -> "Settings":
        """Read once at startup. A missing key is not an error here; the remote call decides."""
        # .env is a dev convenience; real env vars always win
        load_dotenv(find_dotenv(usecwd=True), override=False)
        return cls(
            api_key=os.getenv("GEMINI_API_KEY"),
            base_url=os.getenv("GEMINI_API_BASE") or DEFAULT_BASE_URL,
        )
