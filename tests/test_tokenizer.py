"""
Tokenizer Tests
文本 -> Token序列，含数字扫描、标识符、操作符和错误
"""
import pytest

from core import (
    tokenize, tokens_to_text, Token, TokenType, Operator, Function, Constant,
    CalcError, ErrorKind, END_TOKEN
)


class TestNumbers:

    @pytest.mark.parametrize("text,expected", [
        ("0", 0.0),
        ("42", 42.0),
        ("1.5", 1.5),
        (".5", 0.5),
        ("2.5e3", 2500.0),
        ("2E2", 200.0),
        ("1e+2", 100.0),
        ("1e-3", 0.001),
        ("3.14", 3.14),
        ("1.2.3", 1.23),
    ])
    def test_scan_number(self, text, expected):
        tokens = tokenize(text)
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.VALUE
        assert tokens[0].value == pytest.approx(expected)

    def test_large_exponent_overflows_to_infinity(self):
        assert tokenize("1e400")[0].value == float("inf")

    @pytest.mark.parametrize("text", ["1e", "1e+", "1e-", "2E", "1ex", "1e."])
    def test_missing_exponent_digits(self, text):
        with pytest.raises(CalcError) as exc_info:
            tokenize(text)
        assert exc_info.value.kind == ErrorKind.INVALID_EXPONENT

    def test_exponent_is_not_nested(self):
        # 指数部分只读一段数字，第二个 e 是常数E
        assert tokenize("1e2e1") == [
            Token.number(100),
            Token.constant(Constant.E),
            Token.number(1),
        ]

    def test_number_keeps_source_text(self):
        assert tokenize("  2.50e1 ")[0].text == "2.50e1"


class TestIdentifiers:

    @pytest.mark.parametrize("text,expected", [
        ("sin", Token.function(Function.SIN)),
        ("SQRT", Token.function(Function.SQRT)),
        ("Ln", Token.function(Function.LN)),
        ("neg", Token.function(Function.NEG)),
        ("pi", Token.constant(Constant.PI)),
        ("PI", Token.constant(Constant.PI)),
        ("e", Token.constant(Constant.E)),
    ])
    def test_known_identifiers(self, text, expected):
        assert tokenize(text) == [expected]

    def test_all_functions_resolve(self):
        for fn in Function:
            assert tokenize(fn.value) == [Token.function(fn)]

    @pytest.mark.parametrize("text", ["foo", "sinus", "pie", "x"])
    def test_unknown_identifier(self, text):
        with pytest.raises(CalcError) as exc_info:
            tokenize(text)
        assert exc_info.value.kind == ErrorKind.UNKNOWN_FUNCTION_OR_CONSTANT
        assert exc_info.value.position == 0


class TestOperators:

    def test_all_operator_symbols(self):
        tokens = tokenize("+ - * / % ^ ( ) ,")
        assert [tk.value for tk in tokens] == [
            Operator.ADDITION, Operator.SUBTRACTION, Operator.MULTIPLICATION,
            Operator.DIVISION, Operator.MODULUS, Operator.EXPONENTIATION,
            Operator.LEFT_PAREN, Operator.RIGHT_PAREN, Operator.COMMA,
        ]
        assert all(tk.type == TokenType.OPERATOR for tk in tokens)

    @pytest.mark.parametrize("text,position", [
        ("2 & 3", 2),
        ("_", 0),
        ("1 # 2", 2),
        ("3!", 1),
    ])
    def test_unexpected_character(self, text, position):
        with pytest.raises(CalcError) as exc_info:
            tokenize(text)
        assert exc_info.value.kind == ErrorKind.UNEXPECTED_CHARACTER
        assert exc_info.value.position == position


class TestSequences:

    def test_source_order_without_whitespace(self):
        assert tokenize("2*sin(pi)") == [
            Token.number(2),
            Token.operator(Operator.MULTIPLICATION),
            Token.function(Function.SIN),
            Token.operator(Operator.LEFT_PAREN),
            Token.constant(Constant.PI),
            Token.operator(Operator.RIGHT_PAREN),
        ]

    def test_whitespace_is_skipped(self):
        assert tokenize(" \t2 \n+\r\n 3 ") == tokenize("2+3")

    @pytest.mark.parametrize("text", ["", "   ", "\n"])
    def test_empty_input(self, text):
        assert tokenize(text) == []

    def test_end_sentinel_never_stored(self):
        assert END_TOKEN not in tokenize("1 + 2")

    @pytest.mark.parametrize("text", [
        "2+3*4",
        "sin(0.5)^2 + COS(.5)^2",
        "1.25e-3 % 7 / (pi - e)",
        "-(2^3^2), neg(1)",
        "1.2.3 * 00012",
    ])
    def test_serialize_and_retokenize(self, text):
        tokens = tokenize(text)
        assert tokenize(tokens_to_text(tokens)) == tokens
