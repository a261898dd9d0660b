"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wartości drzewa wyrażenia.
"""
from typing import Optional, Protocol, runtime_checkable

from contracts import ExpressionNode


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, root: Optional[ExpressionNode]) -> float:
        """
        Evaluates an expression tree to a float.
        An absent tree or child evaluates to 0.
        Raises DivisionByZero when a '/' right operand is zero.
        Raises InvalidOperator for an unknown operator symbol.
        """
        ...

    def evaluate_with_steps(
        self, root: Optional[ExpressionNode]
    ) -> tuple[float, list[str]]:
        """
        Same as evaluate(), also returning human-readable computation steps
        in evaluation order, e.g. ["2 + 3 = 5", "5 * 4 = 20"].
        """
        ...
