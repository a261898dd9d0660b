"""
Port: Tokenizer
Odpowiedzialność: zamiana tekstu wyrażenia na ciąg tokenów.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, text: str) -> list[Token]:
        """
        Converts an infix expression into an ordered list of tokens.
        A '+'/'-' in operand position directly followed by a digit or '.'
        is folded into the number literal as its sign.
        Raises InvalidCharacter for characters outside the expression alphabet.
        Raises InvalidNumber for a literal that is not a valid float.
        """
        ...
