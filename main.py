import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging(settings.log_level)

    application = FastAPI(
        title=settings.app_name,
        description="Demo API: simulated question answering and PDF upload into an in-memory vector index",
        version="1.0.0",
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Every error body is {"error": <message>}
    @application.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request.") if errors else "Invalid request."
        logger.warning(f"{request.method} {request.url.path} rejected: {message}")
        return JSONResponse(status_code=400, content={"error": message})

    @application.on_event("startup")
    async def startup_event():
        logger.info(f"{settings.app_name} starting ({settings.environment}), ask mode: {settings.ASK_MODE}")

    from routers.ask import router as ask_router
    from routers.health import router as health_router
    from routers.upload import router as upload_router

    application.include_router(ask_router, prefix="/api", tags=["ask"])
    application.include_router(upload_router, prefix="/api", tags=["upload"])
    application.include_router(health_router, prefix="/api", tags=["health"])

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Server running at http://{settings.host}:{settings.port}")
    uvicorn.run("main:app", host=settings.host, port=settings.port)
