"""Unit tests for validator functions."""

import pytest

from padcalc import (
    ERROR,
    InvalidInputError,
    Operation,
    parse_operand,
    validate_digit,
    validate_number,
    validate_operation,
)


class TestValidateNumber:
    def test_accepts_int(self):
        assert validate_number(42) == 42

    def test_accepts_float(self):
        assert validate_number(3.14) == 3.14

    def test_rejects_nan(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_number(float("nan"))
        assert "NaN" in str(exc_info.value)

    def test_rejects_negative_inf(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_number(float("-inf"))
        assert "Infinity" in str(exc_info.value)

    def test_rejects_string(self):
        with pytest.raises(InvalidInputError):
            validate_number("42")  # type: ignore

    def test_rejects_bool(self):
        with pytest.raises(InvalidInputError):
            validate_number(True)


class TestValidateDigit:
    @pytest.mark.parametrize("digit", list("0123456789."))
    def test_accepts_keypad_digits(self, digit):
        assert validate_digit(digit) == digit

    @pytest.mark.parametrize("bad", ["", "12", "a", "+", " ", None, 1])
    def test_rejects_everything_else(self, bad):
        with pytest.raises(InvalidInputError):
            validate_digit(bad)


class TestValidateOperation:
    @pytest.mark.parametrize(
        ("symbol", "expected"),
        [
            ("+", Operation.ADD),
            ("-", Operation.SUBTRACT),
            ("×", Operation.MULTIPLY),
            ("*", Operation.MULTIPLY),
            ("÷", Operation.DIVIDE),
            ("/", Operation.DIVIDE),
        ],
    )
    def test_resolves_symbols(self, symbol, expected):
        assert validate_operation(symbol) is expected

    def test_passes_enum_through(self):
        assert validate_operation(Operation.SUBTRACT) is Operation.SUBTRACT

    @pytest.mark.parametrize("bad", ["%", "^", "", None, 3])
    def test_rejects_unknown(self, bad):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_operation(bad)
        assert exc_info.value.reason == "Unknown operation"


class TestParseOperand:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [("0", 0.0), ("12", 12.0), ("0.5", 0.5), ("5.", 5.0), ("-3", -3.0), ("1e+21", 1e21)],
    )
    def test_parses_literals(self, text, expected):
        assert parse_operand(text) == expected

    def test_parses_sample_operands(self, sample_operands):
        for text in sample_operands:
            assert parse_operand(text) == float(text)

    @pytest.mark.parametrize("bad", ["", ".", ERROR, "1.2.3", "nan", "inf", "-Infinity"])
    def test_rejects_non_operands(self, bad):
        with pytest.raises(InvalidInputError):
            parse_operand(bad)
