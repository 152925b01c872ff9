"""core/operators.py"""
import numpy as np

from core.token_system import Operator, Function, Constant

CONSTANT_VALUES = {
    Constant.E: np.e,
    Constant.PI: np.pi,
}


class Operators:
    """所有操作符的静态方法集合，输入输出均为 np.float64，inf/NaN 原样传播"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        return operand1 + operand2

    @staticmethod
    def sub(operand1, operand2):
        return operand1 - operand2

    @staticmethod
    def mul(operand1, operand2):
        return operand1 * operand2

    @staticmethod
    def div(operand1, operand2):
        """普通浮点除法，除零得到 ±inf 或 NaN"""
        return np.divide(operand1, operand2)

    @staticmethod
    def mod(operand1, operand2):
        """浮点取余，符号跟随被除数（同C的fmod）"""
        return np.fmod(operand1, operand2)

    @staticmethod
    def pow(operand1, operand2):
        return np.power(operand1, operand2)

    # 一元操作符====================
    @staticmethod
    def neg(operand):
        return np.negative(operand)

    @staticmethod
    def round(operand):
        """四舍五入，.5 远离零（同C的round）"""
        truncated = np.trunc(operand)
        if np.abs(operand - truncated) >= 0.5:
            truncated += np.copysign(1.0, operand)
        return truncated


BINARY_OPERATORS = {
    Operator.ADDITION: Operators.add,
    Operator.SUBTRACTION: Operators.sub,
    Operator.MULTIPLICATION: Operators.mul,
    Operator.DIVISION: Operators.div,
    Operator.MODULUS: Operators.mod,
    Operator.EXPONENTIATION: Operators.pow,
}

UNARY_OPERATORS = {
    Operator.NEGATION: Operators.neg,
}

FUNCTIONS = {
    Function.ABS: np.abs,
    Function.ACOS: np.arccos,
    Function.ASIN: np.arcsin,
    Function.ATAN: np.arctan,
    Function.COS: np.cos,
    Function.COSH: np.cosh,
    Function.EXP: np.exp,
    Function.LN: np.log,
    Function.LOG: np.log10,
    Function.ROUND: Operators.round,
    Function.SIN: np.sin,
    Function.SINH: np.sinh,
    Function.SQRT: np.sqrt,
    Function.TAN: np.tan,
    Function.TANH: np.tanh,
    Function.TRUNC: np.trunc,
    Function.NEG: Operators.neg,
}
