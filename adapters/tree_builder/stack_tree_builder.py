"""
Adapter: StackTreeBuilder
Implementuje port TreeBuilder — budowa drzewa ze stosu węzłów.

  liczba   → nowy liść na stos
  operator → nowy węzeł; pierwsze zdjęcie ze stosu = prawe dziecko,
             drugie = lewe dziecko (prawy operand trafił na stos później)

Pusty stos przy zdejmowaniu zostawia dziecko jako None. Ewaluator liczy
brakujące dziecko jako 0, dzięki czemu "-(3)" daje 0 - 3.
Nawiasy są pomijane (mogą zostać tylko po niesparowanym '(').
"""
from __future__ import annotations

import logging
from typing import Optional

from contracts import ExpressionNode, NumberToken, OperatorToken, Token

logger = logging.getLogger("evalex.tree_builder")


class StackTreeBuilder:
    """Buduje binarne drzewo wyrażenia z ciągu postfiksowego."""

    # -- TreeBuilder protocol ----------------------------------------------

    def build_tree(self, postfix: list[Token]) -> Optional[ExpressionNode]:
        stack: list[ExpressionNode] = []

        for token in postfix:
            if isinstance(token, NumberToken):
                stack.append(ExpressionNode(token=token))
            elif isinstance(token, OperatorToken):
                right = stack.pop() if stack else None
                left = stack.pop() if stack else None
                if right is None or left is None:
                    logger.debug("Operator %r is missing an operand", token.symbol)
                stack.append(ExpressionNode(token=token, left=left, right=right))

        if len(stack) > 1:
            logger.debug("%d dangling subtrees discarded", len(stack) - 1)
        return stack[-1] if stack else None
