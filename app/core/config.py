"""
Description:
Environment-driven configuration for the IntelliHire service.

Values are read from the process environment (a local .env file is loaded first).
Admin and LLM settings are validated when the application starts, so importing
this module never fails.

Dependencies:
- dotenv: For loading environment variables from a .env file.
- os: For environment variable access.
"""
import os
from typing import Dict, List
from dotenv import load_dotenv

load_dotenv()

DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_FEEDBACK_MODEL = "gemini-2.0-flash-001"
DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]


def get_firebase_admin_settings() -> Dict[str, str]:
    """Settings used to construct the Firebase admin app.

    Raises:
        ValueError: If the credentials path is not configured.
    """
    settings = {
        "credentials_path": os.getenv("FIREBASE_CREDENTIALS_PATH"),
        "project_id": os.getenv("FIREBASE_PROJECT_ID"),
    }
    if not settings["credentials_path"]:
        raise ValueError("Missing required environment variables: FIREBASE_CREDENTIALS_PATH")
    return settings


def get_generation_settings() -> Dict[str, str]:
    """Settings for the hosted generation endpoint.

    Raises:
        ValueError: If the API key is not configured.
    """
    api_key = os.getenv("GOOGLE_GENERATIVE_AI_API_KEY")
    if not api_key:
        raise ValueError("Missing required environment variables: GOOGLE_GENERATIVE_AI_API_KEY")
    return {
        "api_key": api_key,
        "base_url": os.getenv("GEMINI_BASE_URL", DEFAULT_GEMINI_BASE_URL),
        "model": os.getenv("FEEDBACK_MODEL", DEFAULT_FEEDBACK_MODEL),
    }


def get_firebase_web_config() -> Dict[str, str]:
    """Public web client configuration rendered into the sign-in page."""
    return {
        "apiKey": os.getenv("FIREBASE_API_KEY", ""),
        "authDomain": os.getenv("FIREBASE_AUTH_DOMAIN", ""),
        "projectId": os.getenv("FIREBASE_PROJECT_ID", ""),
        "storageBucket": os.getenv("FIREBASE_STORAGE_BUCKET", ""),
        "messagingSenderId": os.getenv("FIREBASE_MESSAGING_SENDER_ID", ""),
        "appId": os.getenv("FIREBASE_APP_ID", ""),
        "measurementId": os.getenv("FIREBASE_MEASUREMENT_ID", ""),
    }


def get_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS")
    if not raw:
        return DEFAULT_CORS_ORIGINS
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def session_cookie_secure() -> bool:
    return os.getenv("SESSION_COOKIE_SECURE", "true").lower() in ("1", "true", "yes")
