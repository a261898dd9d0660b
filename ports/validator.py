"""
Port: Validator
Odpowiedzialność: walidacja surowego tekstu przed tokenizacją.
"""
from typing import Protocol, runtime_checkable

from contracts import ValidationIssue


@runtime_checkable
class Validator(Protocol):
    def validate(self, text: str) -> list[ValidationIssue]:
        """
        Checks the raw expression text (e.g. parenthesis balance).
        Returns list of ValidationIssue; empty = text is valid.
        """
        ...
