"""
Adapter: ParenthesesValidator
Implementuje port Validator — sprawdza zbalansowanie nawiasów w surowym
tekście, zanim tekst trafi do tokenizera.

Kody problemów:
  UNMATCHED_CLOSE — ')' bez otwierającego '(' (position = indeks ')')
  UNCLOSED_OPEN   — '(' bez zamykającego ')' (position = indeks '(')

Shunting-yard sam toleruje niesparowane nawiasy, więc ten etap jest
jedynym miejscem, w którym są wykrywane.
"""
from __future__ import annotations

from contracts import ValidationIssue


class ParenthesesValidator:
    """Walidacja zagnieżdżenia nawiasów okrągłych."""

    # -- Validator protocol ------------------------------------

    def validate(self, text: str) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        open_positions: list[int] = []

        for i, ch in enumerate(text):
            if ch == "(":
                open_positions.append(i)
            elif ch == ")":
                if open_positions:
                    open_positions.pop()
                else:
                    issues.append(ValidationIssue(
                        severity="error", code="UNMATCHED_CLOSE",
                        message=f"Unmatched ')' at position {i}",
                        position=i,
                    ))

        for pos in open_positions:
            issues.append(ValidationIssue(
                severity="error", code="UNCLOSED_OPEN",
                message=f"Unclosed '(' at position {pos}",
                position=pos,
            ))

        return issues
