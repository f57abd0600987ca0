"""
Runtime configuration for the contact relay
Values come from the environment (and a local .env file when present)
"""
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_SENDER = "Muhammad Abdullah <onboarding@resend.dev>"
DEFAULT_SIGNATURE = "Muhammad Abdullah"


class Settings(BaseModel):
    resend_api_key: Optional[str] = None
    sender_email: str = DEFAULT_SENDER
    signature: str = DEFAULT_SIGNATURE
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    host: str = "127.0.0.1"
    port: int = 8000


def load_settings() -> Settings:
    """
    Build Settings from environment variables

    RESEND_API_KEY is preferred; RESEND_KEY is accepted for older deployments.
    An unset key is allowed here, every send will fail until it is provided.
    """
    api_key = os.getenv("RESEND_API_KEY") or os.getenv("RESEND_KEY")
    origins = os.getenv("CORS_ORIGINS", "*")

    return Settings(
        resend_api_key=api_key or None,
        sender_email=os.getenv("SENDER_EMAIL", DEFAULT_SENDER),
        signature=os.getenv("EMAIL_SIGNATURE", DEFAULT_SIGNATURE),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )
