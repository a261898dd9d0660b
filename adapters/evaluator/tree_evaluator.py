"""
Adapter: TreeEvaluator
Implementuje port Evaluator — rekurencyjne przejście post-order drzewa
ExpressionNode na liczbach zmiennoprzecinkowych (float).

Semantyka operatorów:
  + - *   zwykła arytmetyka float
  /       dzielnik == 0.0 (także -0.0) → DivisionByZero
  %       oba operandy obcinane do całkowitych (w stronę zera), reszta ze
          znakiem dzielnej jak w C: 4.7 % 3.0 == 1, -7 % 3 == -1
  ^       potęga rzeczywista jak pow() z C: błąd dziedziny → nan,
          przepełnienie i 0 ^ ujemna → ±inf

Brakujący węzeł (None) ma wartość 0. Głębokość rekurencji = głębokość
zagnieżdżenia wyrażenia, bez dodatkowego limitu.
"""
from __future__ import annotations

import math
from typing import Callable, Optional

from contracts import (
    DivisionByZero,
    ExpressionNode,
    InvalidOperator,
    NumberToken,
    format_number,
)


def _safe_div(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZero("/")
    return a / b


def _truncated_mod(a: float, b: float) -> float:
    if not (math.isfinite(a) and math.isfinite(b)):
        return math.nan
    dividend, divisor = math.trunc(a), math.trunc(b)
    if divisor == 0:
        raise DivisionByZero("%")
    return math.fmod(dividend, divisor)


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and int(x) % 2 == 1


def _signed_inf(base: float, exponent: float) -> float:
    negative = math.copysign(1.0, base) < 0 and _is_odd_integer(exponent)
    return -math.inf if negative else math.inf


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return _signed_inf(base, exponent)
    except ValueError:
        # 0 ^ ujemna to biegun, reszta to błąd dziedziny (np. (-8) ^ 0.5)
        if base == 0:
            return _signed_inf(base, exponent)
        return math.nan


# Mapowanie symboli operatorów na operacje float
_OP_FUNCS: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _safe_div,
    "%": _truncated_mod,
    "^": _power,
}


class TreeEvaluator:
    """Ewaluator drzew wyrażeń arytmetycznych na float."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, root: Optional[ExpressionNode]) -> float:
        value, _ = self._eval(root)
        return value

    def evaluate_with_steps(
        self, root: Optional[ExpressionNode]
    ) -> tuple[float, list[str]]:
        """
        Rekurencyjnie oblicza wartość drzewa.
        Zwraca (wartość, lista kroków w kolejności obliczeń).
        """
        return self._eval(root)

    # -- Prywatne ----------------------------------------------------------

    def _eval(self, node: Optional[ExpressionNode]) -> tuple[float, list[str]]:
        """Zwraca (wartość, lista kroków)."""

        if node is None:
            return 0.0, []

        if isinstance(node.token, NumberToken):
            return node.token.value, []

        left_val, left_steps = self._eval(node.left)
        right_val, right_steps = self._eval(node.right)

        symbol = node.token.symbol
        fn = _OP_FUNCS.get(symbol)
        if fn is None:
            raise InvalidOperator(symbol)

        result = fn(left_val, right_val)
        step = f"{format_number(left_val)} {symbol} {format_number(right_val)} = {format_number(result)}"
        return result, left_steps + right_steps + [step]
