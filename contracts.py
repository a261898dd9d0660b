"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w EvalEx.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"

OperatorSymbol = Literal["+", "-", "*", "/", "%", "^"]
ParenSymbol = Literal["(", ")"]

OPERATOR_SYMBOLS: frozenset[str] = frozenset("+-*/%^")
PAREN_SYMBOLS: frozenset[str] = frozenset("()")


# ─────────────────────────── Tokenizer ───────────────────────────────────

class NumberToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: float


class OperatorToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["operator"] = "operator"
    symbol: OperatorSymbol


class ParenToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["paren"] = "paren"
    symbol: ParenSymbol


Token = Union[NumberToken, OperatorToken, ParenToken]


def token_text(token: Token) -> str:
    """Tekstowa postać tokenu, np. do wypisania ciągu postfiksowego."""
    if isinstance(token, NumberToken):
        return format_number(token.value)
    return token.symbol


def format_number(value: float) -> str:
    """Czytelna reprezentacja liczby: 5.0 → "5", 0.125 → "0.125"."""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return f"{value:.10g}"


# ─────────────────────────── TreeBuilder ─────────────────────────────────

class ExpressionNode(BaseModel):
    """
    Węzeł drzewa binarnego. Liść = liczba, węzeł wewnętrzny = operator.
    Nawiasy nigdy nie trafiają do drzewa. Drzewo zbudowane z niepoprawnego
    ciągu postfiksowego może mieć brakujące dzieci (None).
    """
    token: Union[NumberToken, OperatorToken]
    left: Optional["ExpressionNode"] = None
    right: Optional["ExpressionNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


ExpressionNode.model_rebuild()


# ─────────────────────────── Validator ───────────────────────────────────

class ValidationIssue(BaseModel):
    severity: Literal["error", "warning", "info"]
    code: str      # np. "UNMATCHED_CLOSE", "UNCLOSED_OPEN"
    message: str
    position: Optional[int] = None  # indeks znaku w wejściu


# ─────────────────────────── Błędy ───────────────────────────────────────

class ErrorKind(str, Enum):
    INVALID_CHARACTER = "invalid_character"
    INVALID_NUMBER = "invalid_number"
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_OPERATOR = "invalid_operator"
    UNMATCHED_PARENTHESES = "unmatched_parentheses"


class ExpressionError(ValueError):
    """Bazowy błąd potoku wyrażeń. Przerywa bieżące obliczenie."""

    kind: ErrorKind

    def __init__(self, message: str, offending: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.offending = offending

    def to_error(self) -> EvalError:
        return EvalError(kind=self.kind, message=self.message, offending=self.offending)


class InvalidCharacter(ExpressionError):
    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid character in expression: {char}", offending=char)
        self.char = char


class InvalidNumber(ExpressionError):
    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, literal: str) -> None:
        super().__init__(f"Invalid number literal: {literal}", offending=literal)
        self.literal = literal


class DivisionByZero(ExpressionError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, symbol: str = "/") -> None:
        super().__init__("Division by zero", offending=symbol)


class InvalidOperator(ExpressionError):
    kind = ErrorKind.INVALID_OPERATOR

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Invalid operator: {symbol}", offending=symbol)
        self.symbol = symbol


class UnmatchedParentheses(ExpressionError):
    kind = ErrorKind.UNMATCHED_PARENTHESES

    def __init__(self, message: str = "Unmatched parentheses", position: int | None = None) -> None:
        super().__init__(message, offending=None if position is None else str(position))
        self.position = position


# ─────────────────────────── Pipeline ────────────────────────────────────

class EvalError(BaseModel):
    kind: ErrorKind
    message: str
    offending: Optional[str] = None  # znak, literał lub operator


class EvalResult(BaseModel):
    expression: str
    value: Optional[float] = None
    error: Optional[EvalError] = None
    postfix: list[str] = Field(default_factory=list)  # np. ["2", "3", "+"]
    steps: list[str] = Field(default_factory=list)    # czytelne kroki

    @property
    def ok(self) -> bool:
        return self.error is None
