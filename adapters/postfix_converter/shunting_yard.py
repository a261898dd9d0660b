"""
Adapter: ShuntingYardConverter
Implementuje port PostfixConverter — klasyczny algorytm shunting-yard.

Priorytety operatorów:
  + -     → 1
  * / %   → 2
  ^       → 3

Domyślnie wszystkie operatory są lewostronnie łączne, także '^'
("2 ^ 3 ^ 2" == (2^3)^2 == 64). Symbole podane w right_associative
zdejmują ze stosu tylko operatory o ściśle wyższym priorytecie.

Niesparowany ')' jest tolerowany; walidacja nawiasów to osobny etap
(adapters/validator/parentheses_validator.py).
"""
from __future__ import annotations

import logging
from typing import Iterable

from contracts import NumberToken, OperatorToken, ParenToken, Token

logger = logging.getLogger("evalex.shunting_yard")

PRECEDENCE: dict[str, int] = {
    "+": 1, "-": 1,
    "*": 2, "/": 2, "%": 2,
    "^": 3,
}


def precedence(token: Token) -> int:
    """Priorytet operatora; -1 dla tokenów niebędących operatorem."""
    if isinstance(token, OperatorToken):
        return PRECEDENCE.get(token.symbol, -1)
    return -1


class ShuntingYardConverter:
    """Konwerter infiks → postfiks (RPN)."""

    def __init__(self, right_associative: Iterable[str] = ()) -> None:
        self._right_associative = frozenset(right_associative)

    # -- PostfixConverter protocol -----------------------------------------

    def to_postfix(self, tokens: list[Token]) -> list[Token]:
        stack: list[Token] = []
        output: list[Token] = []

        for token in tokens:
            if isinstance(token, NumberToken):
                output.append(token)
            elif isinstance(token, OperatorToken):
                while stack and self._should_pop(stack[-1], token):
                    output.append(stack.pop())
                stack.append(token)
            elif token.symbol == "(":
                stack.append(token)
            else:
                while stack and not _is_open_paren(stack[-1]):
                    output.append(stack.pop())
                if stack:
                    stack.pop()  # '('
                else:
                    logger.debug("Unmatched ')' ignored")

        while stack:
            output.append(stack.pop())

        return output

    # -- Prywatne ----------------------------------------------------------

    def _should_pop(self, top: Token, incoming: OperatorToken) -> bool:
        if not isinstance(top, OperatorToken):
            return False
        if incoming.symbol in self._right_associative:
            return precedence(top) > precedence(incoming)
        return precedence(top) >= precedence(incoming)


def _is_open_paren(token: Token) -> bool:
    return isinstance(token, ParenToken) and token.symbol == "("
