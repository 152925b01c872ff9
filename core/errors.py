"""core/errors.py - 计算错误类型"""
from enum import Enum


class ErrorKind(Enum):
    OUT_OF_MEMORY = "out of memory"
    UNEXPECTED_CHARACTER = "unexpected character"
    INVALID_EXPONENT = "invalid exponent"
    UNKNOWN_FUNCTION_OR_CONSTANT = "unknown function or constant"
    STACK_UNDERFLOW = "stack underflow"
    STACK_NOT_EMPTY = "stack not empty"
    UNKNOWN_CONSTANT = "unknown constant"
    UNHANDLED_OPERATOR = "unhandled operator"
    UNHANDLED_FUNCTION = "unhandled function"
    UNHANDLED_TOKEN_TYPE = "unhandled token type"
    UNEXPECTED_END_OF_INPUT = "unexpected end of input"
    UNEXPECTED_TEXT_AT_END = "unexpected text at end"
    UNMATCHED_PARENTHESIS = "unmatched parenthesis"
    UNEXPECTED_OPERATOR = "unexpected operator"
    MISSING_LEFT_PARENTHESIS = "missing ( after function name"
    MISSING_FUNCTION_ARGUMENT = "missing function argument after comma"


def error_message(kind):
    """错误类型 -> 可读的错误信息"""
    return kind.value


class CalcError(Exception):
    """
    计算流水线中的任何错误。
    kind: ErrorKind
    position: 出错的字符/Token下标（可选，仅用于诊断）
    """

    def __init__(self, kind, position=None):
        super().__init__(error_message(kind))
        self.kind = kind
        self.position = position

    def __repr__(self):
        return f"CalcError({self.kind.name}, position={self.position})"
