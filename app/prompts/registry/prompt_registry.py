from dataclasses import dataclass
from typing import Optional
from app.models.tool_models import ToolCatalog
from app.prompts.feature.trackr_agent.chat_prompt import CHAT_SYSTEM, CHAT_FALLBACK_TEXT
from app.prompts.feature.trackr_agent.insight_prompt import INSIGHT_SYSTEM, INSIGHT_FALLBACK_TEXT
from app.prompts.feature.trackr_agent.function_tool_calling_schema import build_tool_catalog

@dataclass(frozen=True)
class PromptBundle:
    system: str
    fallback_text: str
    tools: Optional[ToolCatalog] = None

@dataclass(frozen=True)
class PromptRegistry:
    chat: PromptBundle
    insight: PromptBundle

    @classmethod
    def default(cls) -> "PromptRegistry":
        return cls(
            chat=PromptBundle(system=CHAT_SYSTEM, fallback_text=CHAT_FALLBACK_TEXT, tools=build_tool_catalog()),
            insight=PromptBundle(system=INSIGHT_SYSTEM, fallback_text=INSIGHT_FALLBACK_TEXT),
        )
