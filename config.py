import importlib.util
import os
from dataclasses import dataclass

from term_collector import DEFAULT_MAX_DEGREE, DEFAULT_MIN_DEGREE

DEFAULT_FACTOR_API_URL = "/api/factor"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    min_degree: int = DEFAULT_MIN_DEGREE
    max_degree: int = DEFAULT_MAX_DEGREE
    factor_api_url: str = DEFAULT_FACTOR_API_URL
    log_level: str = DEFAULT_LOG_LEVEL


def _secret(name):
    # environment first, then .streamlit/secrets.toml
    value = os.environ.get(name)
    if value is None and importlib.util.find_spec("streamlit"):
        import streamlit as st
        try:
            value = st.secrets.get(name)
        except FileNotFoundError:
            value = None
    return value


def _int_setting(name, default):
    raw = _secret(name)
    if raw is None or str(raw).strip() == "":
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def load_settings():
    min_degree = _int_setting("TERM_INPUT_MIN_DEGREE", DEFAULT_MIN_DEGREE)
    max_degree = _int_setting("TERM_INPUT_MAX_DEGREE", DEFAULT_MAX_DEGREE)
    if max_degree < min_degree:
        raise ValueError(f"TERM_INPUT_MAX_DEGREE ({max_degree}) is below TERM_INPUT_MIN_DEGREE ({min_degree})")

    return Settings(
        min_degree=min_degree,
        max_degree=max_degree,
        factor_api_url=_secret("FACTOR_API_URL") or DEFAULT_FACTOR_API_URL,
        log_level=(_secret("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
