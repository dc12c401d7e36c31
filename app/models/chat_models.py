# app/models/chat_models.py
# Chat request/response models. The response is a discriminated union on `type`.

from typing import Annotated, List, Dict, Any, Literal, Union
from pydantic import BaseModel, Field, model_validator

# ---------- Request ----------
class ConversationTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        # Accepts the provider-native shape {role: "model", parts: [{text}]} as well
        if not isinstance(data, dict):
            return data
        out = dict(data)
        if out.get("role") == "model":
            out["role"] = "assistant"
        if "content" not in out and isinstance(out.get("parts"), list):
            texts = []
            for p in out["parts"]:
                text = p.get("text", "") if isinstance(p, dict) else None
                if not isinstance(text, str):
                    raise ValueError("each part must be an object with a string 'text'")
                texts.append(text)
            out["content"] = "".join(texts)
        out.pop("parts", None)
        return out

    def to_llm_message(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}

class ChatMessage(BaseModel):
    history: List[ConversationTurn]
    message: str

class ChatRequest(BaseModel):
    message: ChatMessage

# ---------- Response ----------
class ToolInvocation(BaseModel):
    name: str
    args: Dict[str, Any] = Field(default_factory=dict)

class FunctionCallResponse(BaseModel):
    type: Literal["function_call"] = "function_call"
    calls: List[ToolInvocation] = Field(..., min_length=1)

class TextResponse(BaseModel):
    type: Literal["text"] = "text"
    content: str = Field(..., min_length=1)

ChatResponse = Annotated[Union[FunctionCallResponse, TextResponse], Field(discriminator="type")]

# ---------- Shared ----------
class ErrorResponse(BaseModel):
    error: str

# Callers only ever see this; the cause goes to the log
GENERIC_ERROR_MESSAGE = "failed to generate content"

def error_body() -> Dict[str, str]:
    return ErrorResponse(error=GENERIC_ERROR_MESSAGE).model_dump()
