# app/service/feature/trackr_agent/chat_service.py
from typing import Dict, Any, List, Optional
import json, logging
from openai import OpenAI
from app.models.chat_models import ChatMessage, ChatResponse, ToolInvocation, FunctionCallResponse, TextResponse
from app.models.tool_models import ToolCatalog
from app.prompts.registry.prompt_registry import PromptBundle
from app.service.feature.trackr_agent.base.llm_base import LLMBaseService

def _to_kwargs(maybe_json: Any) -> Dict[str, Any]:
    if isinstance(maybe_json, dict):
        return maybe_json
    if isinstance(maybe_json, str):
        s = maybe_json.strip()
        if not s:
            return {}
        try:
            parsed = json.loads(s)
        except ValueError:
            return {}
        return parsed if isinstance(parsed, dict) else {}
    return {}

class ChatService(LLMBaseService):
    """
    Sends a conversation to the model with the Trackr tool catalog and shapes the reply.

    The model either answers in text or asks for one or more declared functions to be
    called. Calls are returned to the client untouched in order; nothing is executed here.
    """
    tag = "[Chat]"

    def __init__(self, client: Optional[OpenAI], model: str, prompts: PromptBundle, logger: logging.Logger):
        super().__init__(client, model, logger)
        if prompts.tools is None:
            raise ValueError("chat prompts must carry a tool catalog")
        self.prompts = prompts
        self.tools: ToolCatalog = prompts.tools

    def build_messages(self, chat: ChatMessage) -> List[Dict[str, Any]]:
        return [
            {"role": "system", "content": self.prompts.system},
            *[turn.to_llm_message() for turn in chat.history],
            {"role": "user", "content": chat.message},
        ]

    def _extract_calls(self, message: Any) -> List[ToolInvocation]:
        calls: List[ToolInvocation] = []
        for tc in getattr(message, "tool_calls", None) or []:
            fn = getattr(tc, "function", None)
            name = getattr(fn, "name", None)
            if not name:
                continue
            decl = self.tools.get(name)
            if decl is None:
                self.logger.warning("%s dropping call to undeclared tool name=%s", self.tag, name)
                continue
            args = _to_kwargs(getattr(fn, "arguments", None))
            missing = decl.missing_required(args)
            if missing:
                self.logger.warning("%s tool_call name=%s missing required args=%s", self.tag, name, missing)
            calls.append(ToolInvocation(name=name, args=args))
        return calls

    async def dispatch(self, chat: ChatMessage) -> ChatResponse:
        self.logger.info("%s begin history=%d", self.tag, len(chat.history))
        resp = await self.complete(
            self.build_messages(chat),
            tools=self.tools.to_llm_tools(),
            tool_choice="auto",
        )
        message = self.first_message(resp)

        calls = self._extract_calls(message)
        if calls:
            self.logger.info("%s ok type=function_call calls=%s", self.tag, [c.name for c in calls])
            return FunctionCallResponse(calls=calls)

        text = getattr(message, "content", None) or ""
        if not text.strip():
            self.logger.warning("%s empty model response; using fallback text", self.tag)
            return TextResponse(content=self.prompts.fallback_text)

        self.logger.info("%s ok type=text chars=%d", self.tag, len(text))
        return TextResponse(content=text)
