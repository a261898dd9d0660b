"""
Port: PostfixConverter
Odpowiedzialność: przestawienie tokenów infiksowych w notację postfiksową (RPN).
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class PostfixConverter(Protocol):
    def to_postfix(self, tokens: list[Token]) -> list[Token]:
        """
        Reorders infix tokens into postfix order honoring precedence and
        associativity. Never raises: malformed input yields a malformed but
        deterministic sequence and the failure surfaces at evaluation.
        """
        ...
