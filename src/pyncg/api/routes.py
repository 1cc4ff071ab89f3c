"""
API routes: thin adapters that delegate to :class:`MinimizationService`.
"""
from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from pyncg.api.models import (
    DefaultsResponse,
    MinimizationRequest,
    MinimizationResponse,
    ProblemsResponse,
)
from pyncg.core.config import MinimizerConfig
from pyncg.core.exceptions import MinimizationError
from pyncg.core.schemas import MinimizationParams
from pyncg.core.service import MinimizationService
from pyncg.problems import describe, get_problem, list_problems

router = APIRouter()

# The service is stateless, one instance per process is enough.
_service = MinimizationService()


def get_service() -> MinimizationService:
    return _service


def get_defaults(request: Request) -> MinimizerConfig:
    return request.app.state.minimizer_defaults


@router.get("/problems", response_model=ProblemsResponse)
def get_problems():
    problems = [describe(get_problem(name)) for name in list_problems()]
    return {"ok": True, "problems": problems}


@router.get("/defaults", response_model=DefaultsResponse)
def read_defaults(request: Request):
    return {"ok": True, "defaults": get_defaults(request).to_dict()}


@router.post("/minimize", response_model=MinimizationResponse)
def run_minimization(req: MinimizationRequest, request: Request):
    try:
        params = MinimizationParams(
            problem=req.problem,
            beta_formula=req.beta_formula,
            start_point=req.start_point,
            config=req.minimizer_config(get_defaults(request)),
            problem_params=req.problem_params,
        )
        result = get_service().run_minimization(params)
        return {"ok": True, "result": result.to_dict()}
    except (MinimizationError, RuntimeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))
