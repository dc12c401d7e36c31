from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from openai import OpenAI
from app.config.app_config import AppConfig, AppConfigSingleton
from app.models.chat_models import error_body
from app.prompts.registry.prompt_registry import PromptRegistry
from app.service.feature.trackr_agent.base.llm_base import build_llm_client
from app.service.feature.trackr_agent.chat_service import ChatService
from app.service.feature.trackr_agent.insight_service import InsightService
from app.utils.app_logging import get_logger

# Routers
from app.router.health_router import router as health_router
from app.router.feature.trackr_agent.chat_router import router as chat_router
from app.router.feature.trackr_agent.insight_router import router as insight_router

def create_app(cfg: Optional[AppConfig] = None, client: Optional[OpenAI] = None,
               prompts: Optional[PromptRegistry] = None) -> FastAPI:
    """Build the API. Prompts and the tool catalog are validated here, once."""
    cfg = cfg or AppConfigSingleton.instance()
    logger = get_logger(cfg)
    prompts = prompts or PromptRegistry.default()
    if client is None:
        client = build_llm_client(cfg)
    if client is None:
        logger.warning("[App] API_KEY not set; generation endpoints will return errors")

    app = FastAPI(title=cfg.app_title, version=cfg.app_version)
    app.state.config = cfg
    app.state.logger = logger
    app.state.chat_service = ChatService(client, cfg.llm_model, prompts.chat, logger)
    app.state.insight_service = InsightService(client, cfg.llm_model, prompts.insight, logger)

    @app.exception_handler(RequestValidationError)
    async def _malformed_body(request: Request, exc: RequestValidationError):
        logger.error("[App] malformed request path=%s errors=%s", request.url.path, exc.errors())
        return JSONResponse(status_code=500, content=error_body())

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception):
        logger.error("[App] unhandled error path=%s", request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content=error_body())

    app.include_router(health_router)
    app.include_router(chat_router)
    app.include_router(insight_router)

    tools = app.state.chat_service.tools
    logger.info("[App] ready model=%s tools=%d names=%s", cfg.llm_model, len(tools), tools.names)
    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
