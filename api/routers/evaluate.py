"""
Router: POST /evaluate
Liczy wartość jednego wyrażenia. Błąd wyrażenia → 422 z rodzajem błędu.
"""
from __future__ import annotations

import math

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_pipeline, get_settings
from api.schemas import ErrorDetail, EvaluateRequest, EvaluateResponse

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
async def evaluate(
    body: EvaluateRequest,
    pipeline=Depends(get_pipeline),
    settings=Depends(get_settings),
) -> EvaluateResponse:
    if len(body.expression) > settings.max_expression_length:
        raise HTTPException(
            status_code=413,
            detail=f"Expression longer than {settings.max_expression_length} characters",
        )

    outcome = pipeline.run(body.expression)
    if outcome.error is not None:
        raise HTTPException(
            status_code=422,
            detail=ErrorDetail(**outcome.error.model_dump()).model_dump(mode="json"),
        )

    value = outcome.value
    return EvaluateResponse(
        expression=outcome.expression,
        result=value if value is not None and math.isfinite(value) else None,
        postfix=outcome.postfix,
        steps=outcome.steps,
    )
