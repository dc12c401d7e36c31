# app/service/feature/trackr_agent/insight_service.py
from typing import Any, Dict, List, Optional
import json, logging
from openai import OpenAI
from app.prompts.feature.trackr_agent.insight_prompt import INSIGHT_SECTIONS
from app.prompts.registry.prompt_registry import PromptBundle
from app.service.feature.trackr_agent.base.llm_base import LLMBaseService

class InsightService(LLMBaseService):
    """Single-shot narrative analysis of one transaction record. No history, no tools."""
    tag = "[Insight]"

    def __init__(self, client: Optional[OpenAI], model: str, prompts: PromptBundle, logger: logging.Logger):
        super().__init__(client, model, logger)
        self.prompts = prompts

    def build_messages(self, record: Any) -> List[Dict[str, Any]]:
        return [
            {"role": "system", "content": self.prompts.system},
            {"role": "user", "content": json.dumps(record, default=str, ensure_ascii=False)},
        ]

    async def generate(self, record: Any) -> str:
        self.logger.info("%s begin record_type=%s", self.tag, type(record).__name__)
        resp = await self.complete(self.build_messages(record))
        message = self.first_message(resp)

        text = getattr(message, "content", None) or ""
        if not text.strip():
            self.logger.warning("%s empty model response; using fallback text", self.tag)
            return self.prompts.fallback_text

        missing = [s for s in INSIGHT_SECTIONS if s.lower() not in text.lower()]
        if missing:
            self.logger.warning("%s insight missing sections=%s", self.tag, missing)
        self.logger.info("%s ok chars=%d", self.tag, len(text))
        return text
