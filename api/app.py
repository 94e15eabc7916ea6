import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.core.config import get_settings
from api.core.cors import CorsHeadersMiddleware
from api.core.logging_config import configure_logging
from api.db.session import dispose_engine, init_db
from api.routers import personas as personas_router
from api.routers import verify_email as verify_email_router
from api.services.email_verification_service import build_email_verification_service
from api.services.persona_service import PersonaService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    init_db()
    if getattr(app.state, "persona_service", None) is None:
        app.state.persona_service = PersonaService()
    if getattr(app.state, "email_verification_service", None) is None:
        app.state.email_verification_service = build_email_verification_service(settings)
    logger.info("Personas API started (env=%s)", settings.app_env)
    try:
        yield
    finally:
        app.state.email_verification_service.close()
        app.state.email_verification_service = None
        app.state.persona_service = None
        dispose_engine()
        logger.info("Personas API stopped")


async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse({"error": "Cuerpo de la petición inválido"}, status_code=400)


def create_app() -> FastAPI:
    """Factory compatible con uvicorn/gunicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(title="Personas API", lifespan=lifespan)
    application.state.persona_service = None
    application.state.email_verification_service = None
    application.add_middleware(CorsHeadersMiddleware)
    application.add_exception_handler(RequestValidationError, _invalid_body)

    application.include_router(personas_router.router)
    application.include_router(verify_email_router.router)

    @application.get("/health")
    def health():
        return {"ok": True}

    return application


app = create_app()
