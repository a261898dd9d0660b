"""
Adapter: ScanningTokenizer
Implementuje port Tokenizer — skanowanie znak po znaku od lewej do prawej.

Stan skanera:
  buffer          — cyfry i '.' bieżącej liczby (plus ewentualny znak)
  expect_number   — True na początku, po '(' i po operatorze;
                    False po liczbie i po ')'. Białe znaki go nie zmieniają.

Unarny znak:
  '+'/'-' gdy expect_number i następny znak to cyfra lub '.' → część literału.
  W każdym innym przypadku '+'/'-' jest operatorem binarnym.
  Do literału dołączany jest co najwyżej jeden znak, więc "--3" daje
  [OperatorToken('-'), NumberToken(-3.0)].
"""
from __future__ import annotations

import logging
import string

from contracts import (
    OPERATOR_SYMBOLS,
    PAREN_SYMBOLS,
    InvalidCharacter,
    InvalidNumber,
    NumberToken,
    OperatorToken,
    ParenToken,
    Token,
)

logger = logging.getLogger("evalex.tokenizer")

_NUMBER_CHARS = frozenset(string.digits + ".")
_SIGN_CHARS = frozenset("+-")


def _parse_number(literal: str) -> NumberToken:
    try:
        return NumberToken(value=float(literal))
    except ValueError:
        raise InvalidNumber(literal) from None


class ScanningTokenizer:
    """Tokenizer wyrażeń infiksowych z rozpoznawaniem unarnego znaku."""

    # -- Tokenizer protocol ------------------------------------------------

    def tokenize(self, text: str) -> list[Token]:
        tokens: list[Token] = []
        buffer = ""
        expect_number = True

        for i, ch in enumerate(text):
            if ch in _NUMBER_CHARS:
                buffer += ch
                expect_number = False
                continue

            if ch in _SIGN_CHARS and expect_number and self._starts_number(text, i + 1):
                buffer += ch
                continue

            if buffer:
                tokens.append(_parse_number(buffer))
                buffer = ""

            if ch.isspace():
                continue

            if ch in OPERATOR_SYMBOLS:
                tokens.append(OperatorToken(symbol=ch))  # type: ignore[arg-type]
                expect_number = True
            elif ch in PAREN_SYMBOLS:
                tokens.append(ParenToken(symbol=ch))  # type: ignore[arg-type]
                expect_number = ch == "("
            else:
                raise InvalidCharacter(ch)

        if buffer:
            tokens.append(_parse_number(buffer))

        logger.debug("Tokenized %r into %d tokens", text, len(tokens))
        return tokens

    # -- Prywatne ----------------------------------------------------------

    @staticmethod
    def _starts_number(text: str, pos: int) -> bool:
        """True jeśli na pozycji pos zaczyna się literał liczbowy."""
        return pos < len(text) and text[pos] in _NUMBER_CHARS
