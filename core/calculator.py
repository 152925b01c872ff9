"""core/calculator.py - 文本 -> Tokenizer -> [Parser] -> RPNEvaluator -> float"""
import logging

from core.errors import CalcError, ErrorKind
from core.tokenizer import tokenize
from core.parser import convert_infix_to_postfix
from core.rpn_evaluator import stack_calculate

logger = logging.getLogger(__name__)


def calculate(expression, rpn=False):
    """
    计算表达式的值
    Args:
        expression: 表达式文本
        rpn: True表示输入已经是后缀(RPN)写法，跳过解析器
    Returns:
        float
    Raises:
        CalcError: 任何阶段的第一个错误
    """
    try:
        tokens = tokenize(expression)
        if not rpn:
            tokens = convert_infix_to_postfix(tokens)
        result = stack_calculate(tokens)
    except (MemoryError, RecursionError) as e:
        # 括号/函数嵌套过深耗尽调用栈，同样按资源耗尽处理
        raise CalcError(ErrorKind.OUT_OF_MEMORY) from e

    logger.debug(f"{expression!r} = {result!r}")
    return result
