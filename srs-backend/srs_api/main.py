from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from srs_api.cache import NoopCache, build_cache_from_env
from srs_api.logging_setup import configure_logging, logging_middleware
from srs_api.routes import router as srs_router
from srs_api.schemas import SrsErrorResponse
from srs_api.srs.errors import MissingParameterError, ParseError


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.cache = await build_cache_from_env()
    try:
        yield
    finally:
        await app.state.cache.close()


async def _parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
    body = SrsErrorResponse(error="parse_error", srid=exc.srid, message=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump(exclude_none=True))


async def _missing_parameter_handler(request: Request, exc: MissingParameterError) -> JSONResponse:
    body = SrsErrorResponse(
        error="missing_parameter",
        srid=exc.srid,
        message=str(exc),
        parameter=exc.parameter_name,
        epsg_code=exc.epsg_code,
    )
    return JSONResponse(status_code=422, content=body.model_dump(exclude_none=True))


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="srs-backend", lifespan=lifespan)
    # Replaced by the Redis cache on startup when REDIS_URL is reachable
    app.state.cache = NoopCache()

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.middleware("http")(logging_middleware)
    app.add_exception_handler(ParseError, _parse_error_handler)
    app.add_exception_handler(MissingParameterError, _missing_parameter_handler)
    app.include_router(srs_router)
    return app


app = create_app()
