import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

# Token verification collaborator
AUTH_VERIFY_URL = os.getenv("AUTH_VERIFY_URL", "")
AUTH_TIMEOUT = float(os.getenv("AUTH_TIMEOUT", "30.0"))

# Generation backend
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "auto")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "")
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "")
SUMMARY_MAX_TOKENS = int(os.getenv("SUMMARY_MAX_TOKENS", "2048"))

CORS_ALLOW_ORIGIN = os.getenv("CORS_ALLOW_ORIGIN", "*")


@dataclass(frozen=True)
class PlatformCredentials:
    project_id: str
    secret_key: str


def get_platform_credentials() -> PlatformCredentials | None:
    """Read the deployment secrets from the environment.

    Looked up on every call rather than at import so a rotated or removed
    secret takes effect on the next request. Returns None if either is unset.
    """
    project_id = os.getenv("PLATFORM_PROJECT_ID", "")
    secret_key = os.getenv("PLATFORM_SECRET_KEY", "")
    if not project_id or not secret_key:
        return None
    return PlatformCredentials(project_id=project_id, secret_key=secret_key)
