"""core/parser.py - 中缀Token序列 -> 后缀(RPN)Token序列

递归下降，优先级从低到高:
    additive        + -
    multiplicative  * / %
    exponential     ^          (右结合)
    unary           + - 前缀
    primary         数字 | 常数 | 函数调用 | ( expression )
"""
import logging

from core.errors import CalcError, ErrorKind
from core.token_system import Token, TokenType, Operator, END_TOKEN

logger = logging.getLogger(__name__)

ADDITIVE_OPERATORS = (Operator.ADDITION, Operator.SUBTRACTION)
MULTIPLICATIVE_OPERATORS = (Operator.MULTIPLICATION, Operator.DIVISION, Operator.MODULUS)


class ParserState:
    """输入游标 + 输出序列"""

    def __init__(self, in_tokens):
        self.in_tokens = in_tokens
        self.idx = 0
        self.token = END_TOKEN
        self.out_tokens = []

    def eof(self):
        return self.token.type == TokenType.END

    def next(self):
        if self.idx >= len(self.in_tokens):
            self.token = END_TOKEN
        else:
            self.token = self.in_tokens[self.idx]
            self.idx += 1

    def next_check_eof(self):
        self.next()
        if self.eof():
            raise CalcError(ErrorKind.UNEXPECTED_END_OF_INPUT, self.idx)

    def match(self, *ops):
        return self.token.type == TokenType.OPERATOR and self.token.value in ops

    def emit(self, token):
        self.out_tokens.append(token)


class InfixParser:
    """每个语法层级一个方法，共享同一个ParserState"""

    @staticmethod
    def parse_expression(state):
        InfixParser.parse_additive(state)

    @staticmethod
    def parse_additive(state):
        InfixParser.parse_multiplicative(state)
        while state.match(*ADDITIVE_OPERATORS):
            op = state.token
            state.next_check_eof()
            InfixParser.parse_multiplicative(state)
            state.emit(op)

    @staticmethod
    def parse_multiplicative(state):
        InfixParser.parse_exponential(state)
        while state.match(*MULTIPLICATIVE_OPERATORS):
            op = state.token
            state.next_check_eof()
            InfixParser.parse_exponential(state)
            state.emit(op)

    @staticmethod
    def parse_exponential(state):
        # a^b^c -> a b c ^ ^，求值时先算 b^c
        InfixParser.parse_unary(state)
        count = 0
        while state.match(Operator.EXPONENTIATION):
            state.next_check_eof()
            InfixParser.parse_unary(state)
            count += 1
        for _ in range(count):
            state.emit(Token.operator(Operator.EXPONENTIATION))

    @staticmethod
    def parse_unary(state):
        # 一元负号只作用于紧随的primary: -2^2 == (-2)^2
        negate = False
        if state.match(Operator.SUBTRACTION):
            negate = True
            state.next_check_eof()
        elif state.match(Operator.ADDITION):
            state.next_check_eof()
        InfixParser.parse_primary(state)
        if negate:
            state.emit(Token.operator(Operator.NEGATION))

    @staticmethod
    def parse_primary(state):
        token = state.token
        if token.type in (TokenType.VALUE, TokenType.CONSTANT):
            state.emit(token)
            state.next()
        elif token.type == TokenType.FUNCTION:
            InfixParser.parse_function(state)
        elif state.match(Operator.LEFT_PAREN):
            state.next_check_eof()
            InfixParser.parse_expression(state)
            if state.eof():
                raise CalcError(ErrorKind.UNEXPECTED_END_OF_INPUT, state.idx)
            if not state.match(Operator.RIGHT_PAREN):
                raise CalcError(ErrorKind.UNMATCHED_PARENTHESIS, state.idx)
            state.next()
        elif state.eof():
            raise CalcError(ErrorKind.UNEXPECTED_END_OF_INPUT, state.idx)
        else:
            raise CalcError(ErrorKind.UNEXPECTED_OPERATOR, state.idx)

    @staticmethod
    def parse_function(state):
        """
        name ( [expr {, expr}] )
        参数个数不在此检查；多余的参数留在栈上，由求值器报 STACK_NOT_EMPTY
        """
        function_token = state.token
        state.next()
        if not state.match(Operator.LEFT_PAREN):
            raise CalcError(ErrorKind.MISSING_LEFT_PARENTHESIS, state.idx)
        state.next_check_eof()
        while not state.match(Operator.RIGHT_PAREN):
            InfixParser.parse_expression(state)
            if state.match(Operator.COMMA):
                state.next_check_eof()
                if state.match(Operator.RIGHT_PAREN):
                    raise CalcError(ErrorKind.MISSING_FUNCTION_ARGUMENT, state.idx)
        state.next()
        state.emit(function_token)


def convert_infix_to_postfix(tokens):
    """
    中缀Token序列 -> 后缀Token序列
    Args:
        tokens: tokenize() 的输出
    Returns:
        新的list[Token]，输入序列不被修改
    Raises:
        CalcError
    """
    state = ParserState(tokens)
    state.next_check_eof()
    InfixParser.parse_expression(state)
    if not state.eof():
        raise CalcError(ErrorKind.UNEXPECTED_TEXT_AT_END, state.idx)
    logger.debug(f"Postfix: {state.out_tokens}")
    return state.out_tokens
