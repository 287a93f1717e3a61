from __future__ import annotations
import os
from typing import Optional
from langchain_google_genai import ChatGoogleGenerativeAI
from .schema import ROADMAP_SCHEMA

DEFAULT_MODEL = "gemini-2.5-flash"


def _read_secrets() -> dict[str, str]:
    try:
        import streamlit as st  # type: ignore
        if hasattr(st, "secrets"):
            return dict(st.secrets)
    except Exception:
        # No secrets.toml outside `streamlit run`; fall back to the environment
        return {}
    return {}


def _get_secret(name: str) -> Optional[str]:
    secrets = _read_secrets()
    return secrets.get(name) or os.getenv(name)


def get_api_key() -> Optional[str]:
    # Prefer GEMINI_API_KEY, fallback to GOOGLE_API_KEY
    return _get_secret("GEMINI_API_KEY") or _get_secret("GOOGLE_API_KEY")


def get_model_name() -> str:
    return _get_secret("GEMINI_MODEL") or DEFAULT_MODEL


def build_gemini() -> ChatGoogleGenerativeAI:
    """Chat model constrained to reply with JSON matching the roadmap schema."""
    key = get_api_key()
    if not key:
        raise RuntimeError("GEMINI_API_KEY (or GOOGLE_API_KEY) is missing. Set it in .env or Streamlit secrets.")
    os.environ["GOOGLE_API_KEY"] = key
    return ChatGoogleGenerativeAI(
        model=get_model_name(),
        google_api_key=key,
        response_mime_type="application/json",
        response_schema=ROADMAP_SCHEMA,
        # One attempt per request; retrying is left to the user
        max_retries=1,
    )
