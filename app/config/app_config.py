# app/config/app_config.py
# Immutable AppConfig read from the environment once at startup, with the singleton accessor.
# Both AppConfigSingleton.instance() and AppConfigSingleton() are supported.

from dataclasses import dataclass
from typing import Mapping, Optional
import os

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"
DEFAULT_MODEL = "gemini-3-flash-preview"

@dataclass(frozen=True)
class AppConfig:
    project_root: str
    log_file: str
    log_level: str

    llm_api_key: str
    llm_base_url: str
    llm_model: str
    llm_timeout_sec: float

    app_title: str = "Trackr Insights API"
    app_version: str = "0.1.0"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if env is None else env
        root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

        # An explicit empty LOG_FILE turns the file handler off
        log_file = env.get("LOG_FILE")
        if log_file is None:
            log_file = os.path.join(root, "logs", "app.log")

        try:
            timeout = float(env.get("LLM_TIMEOUT_SEC", "60"))
        except ValueError:
            raise ValueError(f"LLM_TIMEOUT_SEC must be a number, got {env.get('LLM_TIMEOUT_SEC')!r}")
        if timeout <= 0:
            raise ValueError("LLM_TIMEOUT_SEC must be positive")

        return cls(
            project_root=root,
            log_file=log_file,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            llm_api_key=env.get("API_KEY") or env.get("GEMINI_API_KEY", ""),
            llm_base_url=env.get("LLM_BASE_URL") or DEFAULT_BASE_URL,
            llm_model=env.get("LLM_MODEL") or DEFAULT_MODEL,
            llm_timeout_sec=timeout,
        )

class AppConfigSingleton:
    _instance: Optional[AppConfig] = None

    @classmethod
    def instance(cls) -> AppConfig:
        if cls._instance is None:
            cls._instance = AppConfig.from_env()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    # Legacy style: AppConfigSingleton() returns the instance
    def __new__(cls):
        return cls.instance()
