"""
FastAPI application factory.

The app carries the minimizer defaults it was built with; every
``POST /api/minimize`` starts from them and overrides only the tunables
the request sets.

Usage::

    uvicorn pyncg.api.app:app
    python -m pyncg.api --safe-min 1e-20
"""
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import pyncg
from pyncg.api.models import HealthResponse
from pyncg.api.routes import router
from pyncg.core.config import MinimizerConfig


def create_app(defaults: Optional[MinimizerConfig] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        defaults: Minimizer tunables applied to requests that leave them
            unset; ``MinimizerConfig()`` when omitted.
    """
    application = FastAPI(
        title="pyncg API",
        version=pyncg.__version__,
        description="Nonlinear conjugate gradient minimization of benchmark problems.",
    )
    application.state.minimizer_defaults = (
        defaults if defaults is not None else MinimizerConfig()
    )

    # Browser clients on other local ports.
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @application.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(version=pyncg.__version__)

    application.include_router(router, prefix="/api")
    return application


app = create_app()
