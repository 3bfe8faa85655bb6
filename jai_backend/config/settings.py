"""Application configuration settings"""

import json
import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


def _optional_float(name: str):
    value = os.getenv(name, "").strip()
    return float(value) if value else None


def _firebase_project_id() -> str:
    """Read project_id from the Firebase service account JSON, if provided."""
    raw = os.getenv("FIREBASE_SERVICE_ACCOUNT_KEY", "").strip()
    if not raw:
        return ""
    try:
        return json.loads(raw).get("project_id", "")
    except (ValueError, AttributeError):
        return ""


class Config:
    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5000"))
    API_PREFIX = os.getenv("API_PREFIX", "")
    DEBUG = _as_bool("DEBUG")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "[%(asctime)s] %(levelname)s %(name)s [%(correlation_id)s] %(message)s",
    )
    LOG_TIMEZONE = os.getenv("LOG_TIMEZONE", "Asia/Kolkata")

    # Model provider
    # "openai": OpenAI SDK against any OpenAI-compatible vendor API (Groq by default)
    # "http":   plain HTTP chat-completions endpoint selecting a named model
    LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai")
    LLM_API_KEY = os.getenv("LLM_API_KEY", os.getenv("GROQ_API_KEY", ""))
    LLM_BASE_URL = os.getenv("LLM_BASE_URL", "https://api.groq.com/openai/v1")
    LLM_MODEL = os.getenv("LLM_MODEL", "llama-3.3-70b-versatile")
    LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "4096"))
    LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.7"))
    LLM_TIMEOUT = _optional_float("LLM_TIMEOUT")  # seconds, None = no timeout

    LLM_HTTP_URL = os.getenv(
        "LLM_HTTP_URL", "https://openrouter.ai/api/v1/chat/completions"
    )
    LLM_HTTP_API_KEY = os.getenv("LLM_HTTP_API_KEY", "")
    LLM_HTTP_MODEL = os.getenv("LLM_HTTP_MODEL", "meta-llama/llama-3.3-70b-instruct")

    # Chat behaviour
    REASONING_MODE = _as_bool("REASONING_MODE")
    PERSIST_USER_TURN_EAGERLY = _as_bool("PERSIST_USER_TURN_EAGERLY")
    MEMORY_CONVERSATION_LIMIT = int(os.getenv("MEMORY_CONVERSATION_LIMIT", "5"))
    MEMORY_SNIPPET_CHARS = int(os.getenv("MEMORY_SNIPPET_CHARS", "150"))

    # Auth
    # Firebase ID tokens are RS256 JWTs signed with Google's published keys.
    FIREBASE_PROJECT_ID = _firebase_project_id()
    AUTH_JWKS_URL = os.getenv(
        "AUTH_JWKS_URL",
        "https://www.googleapis.com/service_accounts/v1/jwk/securetoken@system.gserviceaccount.com"
        if FIREBASE_PROJECT_ID
        else "",
    )
    AUTH_SECRET = os.getenv("AUTH_SECRET", "")
    AUTH_AUDIENCE = os.getenv("AUTH_AUDIENCE", FIREBASE_PROJECT_ID)
    AUTH_ISSUER = os.getenv(
        "AUTH_ISSUER",
        f"https://securetoken.google.com/{FIREBASE_PROJECT_ID}"
        if FIREBASE_PROJECT_ID
        else "",
    )

    # Database (read by Prisma from the environment)
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
