"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from standgen import config
from standgen.api.routes import router
from standgen.core.validation import SpecValidationError


async def spec_validation_error_handler(request: Request, exc: SpecValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"is_valid": False, "errors": exc.errors})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Display Stand Generator",
        description="Parametric display-stand geometry engine",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(SpecValidationError, spec_validation_error_handler)
    app.include_router(router, prefix="/api")

    return app


app = create_app()
