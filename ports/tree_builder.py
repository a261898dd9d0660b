"""
Port: TreeBuilder
Odpowiedzialność: budowa binarnego drzewa wyrażenia z ciągu postfiksowego.
"""
from typing import Optional, Protocol, runtime_checkable

from contracts import ExpressionNode, Token


@runtime_checkable
class TreeBuilder(Protocol):
    def build_tree(self, postfix: list[Token]) -> Optional[ExpressionNode]:
        """
        Builds an expression tree from postfix tokens.
        Returns None for an empty sequence. Operators lacking operands get
        absent children instead of an error.
        """
        ...
