"""HTTP interface for evaluating duration expressions."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .durations import Duration
from .errors import DurationError
from .evaluator import evaluate_tokens
from .units import CONVERSION_TABLE


class EvaluateRequest(BaseModel):
    tokens: List[str]


def _result_payload(expression: str, result: Duration) -> Dict[str, Any]:
    return {
        "expression": expression,
        "result": str(result),
        "seconds": result.to_seconds(),
        "units": result.as_dict(),
    }


def _error_detail(exc: DurationError) -> Dict[str, str]:
    return {"error": type(exc).__name__, "message": str(exc)}


def create_app(logger: Optional[logging.Logger] = None) -> FastAPI:
    app = FastAPI(title="durcalc API")
    app.state.logger = logger or logging.getLogger("durcalc")

    def _evaluate(tokens: List[str]) -> Dict[str, Any]:
        expression = " ".join(tokens)
        try:
            result = evaluate_tokens(tokens)
        except DurationError as exc:
            app.state.logger.warning(f"[reject] {expression!r}: {exc}")
            raise HTTPException(status_code=400, detail=_error_detail(exc)) from exc
        app.state.logger.info(f"[eval] {expression} = {result}")
        return _result_payload(expression, result)

    @app.get("/api/evaluate")
    async def api_evaluate(expr: str) -> JSONResponse:
        return JSONResponse(_evaluate(expr.split()))

    @app.post("/api/evaluate")
    async def api_evaluate_tokens(request: EvaluateRequest) -> JSONResponse:
        return JSONResponse(_evaluate(request.tokens))

    @app.get("/api/units")
    async def api_units() -> JSONResponse:
        return JSONResponse(dict(CONVERSION_TABLE))

    return app
