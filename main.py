import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.api_router import api_router
from core.config import settings
from core.database import build_engine, build_session_factory, init_models
from services.statistics_service import StatisticsService
from services.storage import CharityStorage

logger = logging.getLogger(__name__)


def _field_name(loc) -> str:
    # drop the "body"/"query"/"path" prefix
    return ".".join(str(part) for part in loc[1:]) or str(loc[0])


def _error_message(error) -> str:
    message = error.get("msg", "Invalid value")
    return message.removeprefix("Value error, ")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": _field_name(error.get("loc", ())), "message": _error_message(error)}
        for error in exc.errors()
    ]
    message = errors[0]["message"] if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"message": message, "errors": errors})


async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Store error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def create_app(database_url: str = None) -> FastAPI:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title=settings.APP_NAME,
        description="Campaigns, donations and volunteer events for a charity",
        version="1.0.0",
    )

    # one engine and one data-access object per process
    engine = build_engine(database_url)
    session_factory = build_session_factory(engine)
    app.state.engine = engine
    app.state.storage = CharityStorage(session_factory)
    app.state.statistics = StatisticsService(session_factory)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_exception_handler)

    app.include_router(api_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event():
        await init_models(engine)
        if settings.SECRET_KEY == "change-me-in-production":
            logger.warning("SECRET_KEY is the built-in default; set it in the environment")
        logger.info(f"{settings.APP_NAME} started")

    @app.on_event("shutdown")
    async def shutdown_event():
        await engine.dispose()
        logger.info(f"{settings.APP_NAME} stopped")

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "message": f"{settings.APP_NAME} is running",
            "version": "1.0.0",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
