"""核心模块 - Token系统、Tokenizer、中缀解析器和RPN评估器"""
from .errors import ErrorKind, CalcError, error_message
from .token_system import (
    TokenType, Operator, Function, Constant, Token, END_TOKEN,
    IDENTIFIER_DEFINITIONS, OPERATOR_SYMBOLS, tokens_to_text
)
from .tokenizer import Tokenizer, tokenize
from .parser import ParserState, InfixParser, convert_infix_to_postfix
from .rpn_evaluator import RPNEvaluator, stack_calculate
from .operators import Operators
from .calculator import calculate

__all__ = [
    'ErrorKind', 'CalcError', 'error_message',
    'TokenType', 'Operator', 'Function', 'Constant', 'Token', 'END_TOKEN',
    'IDENTIFIER_DEFINITIONS', 'OPERATOR_SYMBOLS', 'tokens_to_text',
    'Tokenizer', 'tokenize',
    'ParserState', 'InfixParser', 'convert_infix_to_postfix',
    'RPNEvaluator', 'stack_calculate', 'Operators',
    'calculate'
]
