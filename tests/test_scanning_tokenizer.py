import pytest

from adapters.tokenizer.scanning_tokenizer import ScanningTokenizer
from contracts import (
    InvalidCharacter,
    InvalidNumber,
    NumberToken,
    OperatorToken,
    ParenToken,
)


def _num(v):
    return NumberToken(value=v)


def _op(s):
    return OperatorToken(symbol=s)


def _paren(s):
    return ParenToken(symbol=s)


def test_tokenize_simple_binary_expression():
    tokens = ScanningTokenizer().tokenize("3 + 4")

    assert tokens == [_num(3.0), _op("+"), _num(4.0)]


def test_tokenize_decimal_and_parentheses_without_spaces():
    tokens = ScanningTokenizer().tokenize("(2.5*4)")

    assert tokens == [_paren("("), _num(2.5), _op("*"), _num(4.0), _paren(")")]


def test_tokenize_folds_leading_sign_into_literal():
    tokens = ScanningTokenizer().tokenize("+2 ^ (-3)")

    assert tokens == [_num(2.0), _op("^"), _paren("("), _num(-3.0), _paren(")")]


def test_tokenize_sign_after_operator_is_part_of_literal():
    tokens = ScanningTokenizer().tokenize("2 - -3")

    assert tokens == [_num(2.0), _op("-"), _num(-3.0)]


def test_tokenize_minus_after_number_is_binary_operator():
    tokens = ScanningTokenizer().tokenize("5-2")

    assert tokens == [_num(5.0), _op("-"), _num(2.0)]


def test_tokenize_minus_after_closing_paren_is_binary_operator():
    tokens = ScanningTokenizer().tokenize("(1)-2")

    assert tokens == [_paren("("), _num(1.0), _paren(")"), _op("-"), _num(2.0)]


def test_tokenize_sign_before_parenthesis_stays_operator():
    tokens = ScanningTokenizer().tokenize("-(5)")

    assert tokens == [_op("-"), _paren("("), _num(5.0), _paren(")")]


def test_tokenize_sign_separated_by_space_stays_operator():
    tokens = ScanningTokenizer().tokenize("- 3")

    assert tokens == [_op("-"), _num(3.0)]


def test_tokenize_sign_run_folds_only_last_sign():
    assert ScanningTokenizer().tokenize("--3") == [_op("-"), _num(-3.0)]
    assert ScanningTokenizer().tokenize("+-3") == [_op("+"), _num(-3.0)]


def test_tokenize_leading_decimal_point_with_sign():
    assert ScanningTokenizer().tokenize("-.5") == [_num(-0.5)]


def test_tokenize_empty_and_blank_input():
    assert ScanningTokenizer().tokenize("") == []
    assert ScanningTokenizer().tokenize(" \t ") == []


def test_tokenize_raises_invalid_character():
    with pytest.raises(InvalidCharacter) as exc_info:
        ScanningTokenizer().tokenize("7 & 3")

    assert exc_info.value.char == "&"
    assert str(exc_info.value) == "Invalid character in expression: &"


def test_tokenize_raises_invalid_character_inside_parentheses():
    with pytest.raises(InvalidCharacter) as exc_info:
        ScanningTokenizer().tokenize("((7 * 3) @ 2)")

    assert exc_info.value.char == "@"


def test_tokenize_rejects_letters():
    with pytest.raises(InvalidCharacter):
        ScanningTokenizer().tokenize("1e5")


def test_tokenize_raises_invalid_number_for_two_decimal_points():
    with pytest.raises(InvalidNumber) as exc_info:
        ScanningTokenizer().tokenize("1.2.3 + 1")

    assert exc_info.value.literal == "1.2.3"


def test_tokenize_raises_invalid_number_for_lone_point():
    with pytest.raises(InvalidNumber):
        ScanningTokenizer().tokenize(". + 1")
