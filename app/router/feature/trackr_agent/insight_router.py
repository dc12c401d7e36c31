# app/router/feature/trackr_agent/insight_router.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from app.models.chat_models import ErrorResponse, error_body
from app.models.insight_models import InsightRequest, InsightResponse
from app.service.feature.trackr_agent.insight_service import InsightService
from app.service.feature.trackr_agent.base.llm_base import LLMServiceError

router = APIRouter(prefix="/api", tags=["insight"])

def get_insight_service(request: Request) -> InsightService:
    return request.app.state.insight_service

@router.post("/insight", response_model=InsightResponse, responses={500: {"model": ErrorResponse}})
async def insight(req: InsightRequest, service: InsightService = Depends(get_insight_service)):
    try:
        text = await service.generate(req.object)
        return InsightResponse(res=text)
    except LLMServiceError as e:
        service.logger.error("[Insight] failed code=%s status=%d message=%s", e.code, e.http_status, e.message)
        return JSONResponse(status_code=500, content=error_body())
    except Exception as e:
        service.logger.exception("[Insight] unexpected failure: %s", e)
        return JSONResponse(status_code=500, content=error_body())
