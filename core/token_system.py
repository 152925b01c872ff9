"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    END = "end"  # 仅供扫描/解析游标内部使用，不会出现在Token序列中
    OPERATOR = "operator"
    FUNCTION = "function"
    CONSTANT = "constant"
    VALUE = "value"


class Operator(Enum):
    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    MULTIPLICATION = "multiplication"
    DIVISION = "division"
    MODULUS = "modulus"
    NEGATION = "negation"  # 由解析器生成
    EXPONENTIATION = "exponentiation"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    COMMA = "comma"


class Function(Enum):
    ABS = "abs"
    ACOS = "acos"
    ASIN = "asin"
    ATAN = "atan"
    COS = "cos"
    COSH = "cosh"
    EXP = "exp"
    LN = "ln"
    LOG = "log"
    ROUND = "round"
    SIN = "sin"
    SINH = "sinh"
    SQRT = "sqrt"
    TAN = "tan"
    TANH = "tanh"
    TRUNC = "trunc"
    NEG = "neg"


class Constant(Enum):
    E = "e"
    PI = "pi"


class Token:
    """
    带标签的Token：type决定value的含义
    - VALUE: float
    - OPERATOR: Operator
    - FUNCTION: Function
    - CONSTANT: Constant
    text保存数字的原始写法，不参与比较
    """

    __slots__ = ('type', 'value', 'text')

    def __init__(self, token_type, value=None, text=None):
        self.type = token_type
        self.value = value
        self.text = text

    @classmethod
    def number(cls, value, text=None):
        return cls(TokenType.VALUE, float(value), text)

    @classmethod
    def operator(cls, op):
        return cls(TokenType.OPERATOR, op)

    @classmethod
    def function(cls, fn):
        return cls(TokenType.FUNCTION, fn)

    @classmethod
    def constant(cls, c):
        return cls(TokenType.CONSTANT, c)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        if self.type == TokenType.END:
            return "Token(END)"
        if self.type == TokenType.VALUE:
            return f"Token(VALUE, {self.value!r})"
        return f"Token({self.type.name}, {self.value.name})"


END_TOKEN = Token(TokenType.END)

# 标识符定义表（大小写不敏感，键为小写）
IDENTIFIER_DEFINITIONS = {fn.value: Token.function(fn) for fn in Function}
IDENTIFIER_DEFINITIONS.update({c.value: Token.constant(c) for c in Constant})

# 单字符操作符
OPERATOR_SYMBOLS = {
    '+': Operator.ADDITION,
    '-': Operator.SUBTRACTION,
    '*': Operator.MULTIPLICATION,
    '/': Operator.DIVISION,
    '%': Operator.MODULUS,
    '^': Operator.EXPONENTIATION,
    '(': Operator.LEFT_PAREN,
    ')': Operator.RIGHT_PAREN,
    ',': Operator.COMMA,
}
SYMBOL_OF_OPERATOR = {op: symbol for symbol, op in OPERATOR_SYMBOLS.items()}


def token_to_text(token):
    """单个Token -> 可被tokenize重新读回的文本"""
    if token.type == TokenType.VALUE:
        if token.text is not None:
            return token.text
        return repr(token.value)
    if token.type == TokenType.OPERATOR:
        if token.value not in SYMBOL_OF_OPERATOR:
            # NEGATION 没有对应的符号，用等价的函数写法
            return Function.NEG.value
        return SYMBOL_OF_OPERATOR[token.value]
    if token.type in (TokenType.FUNCTION, TokenType.CONSTANT):
        return token.value.value
    raise ValueError(f"Cannot serialize {token!r}")


def tokens_to_text(token_sequence):
    """Token序列 -> 以空格分隔的文本"""
    return ' '.join(token_to_text(tk) for tk in token_sequence)
