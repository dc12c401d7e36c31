# app/router/feature/trackr_agent/chat_router.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from app.models.chat_models import ChatRequest, ChatResponse, ErrorResponse, error_body
from app.service.feature.trackr_agent.chat_service import ChatService
from app.service.feature.trackr_agent.base.llm_base import LLMServiceError

router = APIRouter(prefix="/api", tags=["chat"])

def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service

@router.post("/chat", response_model=ChatResponse, responses={500: {"model": ErrorResponse}})
async def chat(req: ChatRequest, service: ChatService = Depends(get_chat_service)):
    try:
        return await service.dispatch(req.message)
    except LLMServiceError as e:
        service.logger.error("[Chat] failed code=%s status=%d message=%s", e.code, e.http_status, e.message)
        return JSONResponse(status_code=500, content=error_body())
    except Exception as e:
        service.logger.exception("[Chat] unexpected failure: %s", e)
        return JSONResponse(status_code=500, content=error_body())
