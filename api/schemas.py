"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from contracts import ErrorKind


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(min_length=1)


class EvaluateResponse(BaseModel):
    expression: str
    result: Optional[float]      # None gdy wynik to nan/inf (JSON ich nie zna)
    postfix: list[str]
    steps: list[str]


class ErrorDetail(BaseModel):
    kind: ErrorKind
    message: str
    offending: Optional[str] = None


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
