# app/service/feature/trackr_agent/base/llm_base.py
from typing import Dict, Any, List, Optional
import asyncio, logging, time
from openai import (
    OpenAI, AuthenticationError, PermissionDeniedError, RateLimitError, APITimeoutError,
    APIConnectionError, BadRequestError, APIStatusError,
)
from app.config.app_config import AppConfig

class LLMServiceError(RuntimeError):
    def __init__(self, code: str, http_status: int, message: str, details: Dict[str, Any] = None):
        super().__init__(message)
        self.code = code
        self.http_status = http_status
        self.message = message
        self.details = details or {}

def build_llm_client(cfg: AppConfig) -> Optional[OpenAI]:
    """OpenAI-compatible client for the configured provider; None when no API key is set.

    Retries are disabled: a failed call is reported to the caller as-is.
    """
    if not cfg.llm_api_key:
        return None
    return OpenAI(
        api_key=cfg.llm_api_key,
        base_url=cfg.llm_base_url,
        timeout=cfg.llm_timeout_sec,
        max_retries=0,
    )

def _usage_meta(resp: Any) -> Dict[str, int]:
    usage = getattr(resp, "usage", None)
    if not usage:
        return {}
    return {
        "prompt_tokens": getattr(usage, "prompt_tokens", 0) or 0,
        "completion_tokens": getattr(usage, "completion_tokens", 0) or 0,
    }

class LLMBaseService:
    # Bracketed tag prefixed to every log line of the subclass
    tag = "[LLM]"

    def __init__(self, client: Optional[OpenAI], model: str, logger: logging.Logger):
        self.client = client
        self.model = model
        self.logger = logger

    async def complete(self, messages: List[Dict[str, Any]], **kwargs) -> Any:
        if self.client is None:
            raise LLMServiceError("LLM_NOT_CONFIGURED", 503, "LLM client not initialized; set API_KEY.")

        def _op():
            return self.client.chat.completions.create(model=self.model, messages=messages, **kwargs)

        t0 = time.perf_counter()
        try:
            resp = await asyncio.to_thread(_op)
        except (AuthenticationError, PermissionDeniedError) as e:
            raise LLMServiceError("LLM_AUTH", 401, f"Authentication failed: {e}") from e
        except RateLimitError as e:
            raise LLMServiceError("LLM_RATE_LIMIT", 429, f"Rate limit: {e}") from e
        except APITimeoutError as e:
            raise LLMServiceError("LLM_TIMEOUT", 504, f"Timed out: {e}") from e
        except APIConnectionError as e:
            raise LLMServiceError("LLM_UNAVAILABLE", 503, f"Connection failure: {e}") from e
        except BadRequestError as e:
            raise LLMServiceError("LLM_BAD_REQUEST", 400, f"Rejected request: {e}") from e
        except APIStatusError as e:
            raise LLMServiceError("LLM_UNAVAILABLE", 503, f"LLM error status={e.status_code}: {e}") from e
        except Exception as e:
            raise LLMServiceError("LLM_UNAVAILABLE", 503, f"LLM error: {e}") from e

        llm_ms = round((time.perf_counter() - t0) * 1000, 2)
        self.logger.info("%s model=%s llm_ms=%.2f usage=%s", self.tag, self.model, llm_ms, _usage_meta(resp) or None)
        return resp

    @staticmethod
    def first_message(resp: Any) -> Any:
        choices = getattr(resp, "choices", None) or []
        if not choices:
            return None
        return getattr(choices[0], "message", None)
