"""core/tokenizer.py - 文本 -> Token序列"""
import logging

import numpy as np

from core.errors import CalcError, ErrorKind
from core.token_system import Token, END_TOKEN, IDENTIFIER_DEFINITIONS, OPERATOR_SYMBOLS

logger = logging.getLogger(__name__)


def _is_digit(c):
    return '0' <= c <= '9'


def _is_letter(c):
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z'


class Tokenizer:
    """逐字符扫描的游标，字符串末尾返回空字符"""

    def __init__(self, text):
        self.text = text
        self.idx = 0

    def curr_char(self):
        if self.idx >= len(self.text):
            return ''
        return self.text[self.idx]

    def next_char(self):
        self.idx += 1
        return self.curr_char()

    def skip_whitespace(self):
        while self.curr_char().isspace():
            self.next_char()

    def _scan_digits(self, allow_dot=True):
        """
        累加一段十进制数字
        整数部分: value*10+digit；小数点之后按 0.1, 0.01, ... 逐位加权
        Returns:
            (value, digit_count)
        """
        number = 0.0
        divider = 0.1
        dot_seen = False
        digits = 0
        while True:
            c = self.curr_char()
            if c == '.' and allow_dot:
                dot_seen = True
            elif _is_digit(c):
                digit = ord(c) - ord('0')
                if dot_seen:
                    number += digit * divider
                    divider /= 10.0
                else:
                    number = number * 10.0 + digit
                digits += 1
            else:
                break
            self.next_char()
        return number, digits

    def scan_number(self):
        start = self.idx
        number, _ = self._scan_digits()

        if self.curr_char() in ('e', 'E'):
            c = self.next_char()
            sign = 1.0
            if c == '-':
                sign = -1.0
                self.next_char()
            elif c == '+':
                self.next_char()
            exponent, digits = self._scan_digits()
            if digits == 0:
                raise CalcError(ErrorKind.INVALID_EXPONENT, self.idx)
            with np.errstate(all='ignore'):
                number = float(np.float64(number) * np.power(10.0, sign * exponent))

        return Token.number(number, self.text[start:self.idx])

    def scan_identifier(self):
        start = self.idx
        while _is_letter(self.curr_char()):
            self.next_char()
        identifier = self.text[start:self.idx]
        token = IDENTIFIER_DEFINITIONS.get(identifier.lower())
        if token is None:
            raise CalcError(ErrorKind.UNKNOWN_FUNCTION_OR_CONSTANT, start)
        return token

    def next_token(self):
        self.skip_whitespace()
        c = self.curr_char()
        if c == '':
            return END_TOKEN
        if c == '.' or _is_digit(c):
            return self.scan_number()
        if _is_letter(c):
            return self.scan_identifier()

        op = OPERATOR_SYMBOLS.get(c)
        if op is None:
            raise CalcError(ErrorKind.UNEXPECTED_CHARACTER, self.idx)
        self.next_char()
        return Token.operator(op)

    def tokens(self):
        while True:
            token = self.next_token()
            if token is END_TOKEN:
                return
            yield token


def tokenize(text):
    """
    把表达式文本切分为Token序列
    Args:
        text: 中缀或RPN表达式
    Returns:
        list[Token]，不含END
    Raises:
        CalcError: UNEXPECTED_CHARACTER / INVALID_EXPONENT / UNKNOWN_FUNCTION_OR_CONSTANT
    """
    token_sequence = list(Tokenizer(text).tokens())
    logger.debug(f"Tokenized {len(token_sequence)} tokens from {text!r}")
    return token_sequence
