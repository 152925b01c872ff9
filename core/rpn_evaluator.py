"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from core.errors import CalcError, ErrorKind
from core.token_system import TokenType
from core.operators import BINARY_OPERATORS, UNARY_OPERATORS, FUNCTIONS, CONSTANT_VALUES

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _pop(stack, position):
        if not stack:
            raise CalcError(ErrorKind.STACK_UNDERFLOW, position)
        return stack.pop()

    @staticmethod
    def evaluate(token_sequence):
        """
        单次从左到右扫描，显式操作数栈
        Args:
            token_sequence: 后缀Token序列
        Returns:
            float
        Raises:
            CalcError: STACK_UNDERFLOW / STACK_NOT_EMPTY 以及内部一致性错误
        """
        stack = []

        with np.errstate(all='ignore'):
            for i, token in enumerate(token_sequence):
                if token.type == TokenType.VALUE:
                    stack.append(np.float64(token.value))

                elif token.type == TokenType.CONSTANT:
                    if token.value not in CONSTANT_VALUES:
                        raise CalcError(ErrorKind.UNKNOWN_CONSTANT, i)
                    stack.append(np.float64(CONSTANT_VALUES[token.value]))

                elif token.type == TokenType.OPERATOR:
                    if token.value in BINARY_OPERATORS:
                        # 先弹出的是右操作数
                        operand2 = RPNEvaluator._pop(stack, i)
                        operand1 = RPNEvaluator._pop(stack, i)
                        stack.append(BINARY_OPERATORS[token.value](operand1, operand2))
                    elif token.value in UNARY_OPERATORS:
                        operand = RPNEvaluator._pop(stack, i)
                        stack.append(UNARY_OPERATORS[token.value](operand))
                    else:
                        raise CalcError(ErrorKind.UNHANDLED_OPERATOR, i)

                elif token.type == TokenType.FUNCTION:
                    operand = RPNEvaluator._pop(stack, i)
                    fn = FUNCTIONS.get(token.value)
                    if fn is None:
                        raise CalcError(ErrorKind.UNHANDLED_FUNCTION, i)
                    stack.append(fn(operand))

                else:
                    raise CalcError(ErrorKind.UNHANDLED_TOKEN_TYPE, i)

        result = RPNEvaluator._pop(stack, len(token_sequence))
        if stack:
            logger.debug(f"Stack has {len(stack) + 1} elements after evaluation, expected 1")
            raise CalcError(ErrorKind.STACK_NOT_EMPTY, len(token_sequence))
        return float(result)


def stack_calculate(postfix_tokens):
    """后缀Token序列 -> 数值结果"""
    return RPNEvaluator.evaluate(postfix_tokens)
