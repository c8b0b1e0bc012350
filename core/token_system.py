"""core/token_system.py"""
from enum import Enum
import logging

from core.result import Outcome, ErrorCode

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"  # 数值
    OPERATOR = "operator"  # 二元操作符
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"


class Token:
    """不可变的Token；只在单次求值内存在"""

    __slots__ = ("type", "value")

    def __init__(self, token_type, value=None):
        object.__setattr__(self, "type", token_type)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Token is immutable")

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def operator(cls, symbol):
        return cls(TokenType.OPERATOR, symbol)

    @classmethod
    def open_paren(cls):
        return cls(TokenType.OPEN_PAREN, '(')

    @classmethod
    def close_paren(cls):
        return cls(TokenType.CLOSE_PAREN, ')')

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"


class OperatorInfo:
    def __init__(self, symbol, name, precedence, right_assoc=False):
        self.symbol = symbol
        self.name = name  # Operators 中对应的方法名
        self.precedence = precedence
        self.right_assoc = right_assoc


# 操作符定义：优先级与结合性（全部左结合，没有乘方）
OPERATOR_DEFINITIONS = {
    '+': OperatorInfo('+', 'add', 1),
    '-': OperatorInfo('-', 'sub', 1),
    '*': OperatorInfo('*', 'mul', 2),
    '/': OperatorInfo('/', 'div', 2),
    '%': OperatorInfo('%', 'mod', 2),
}

DIGITS = "0123456789"


def _next_non_space(text, idx):
    """返回 idx 之后第一个非空白字符的位置"""
    j = idx + 1
    while j < len(text) and text[j].isspace():
        j += 1
    return j


def _read_numeral(text, start, sign=''):
    """
    从 start 读取最长的 “数字/小数点” 串

    Returns:
        (Outcome, end)
    """
    end = start
    while end < len(text) and (text[end] in DIGITS or text[end] == '.'):
        end += 1
    raw = text[start:end]
    # 多个小数点，或只有一个小数点
    if raw.count('.') > 1 or raw == '.':
        return Outcome.failure(ErrorCode.BAD_NUMBER), end
    return Outcome.success(Token.number(sign + raw)), end


def tokenize(text):
    """
    从左到右把（改写后的）表达式切分为Token序列，遇到第一个错误立即返回

    '-' 在输入开头、操作符之后或 '(' 之后为一元负号：
      - 后面（跳过空白）是数字或小数点 -> 并入负数
      - 后面是 '(' -> 生成 Number(-1) 和 Operator('*')，只消耗 '-'
    其他位置的 '-' 均为二元减号。
    """
    tokens = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch.isspace():
            i += 1
            continue

        prev = tokens[-1] if tokens else None

        if ch == '-' and (prev is None or prev.type in (TokenType.OPERATOR, TokenType.OPEN_PAREN)):
            look = _next_non_space(text, i)
            look_ch = text[look] if look < len(text) else ''
            if look_ch != '' and (look_ch in DIGITS or look_ch == '.'):
                outcome, i = _read_numeral(text, look, sign='-')
                if not outcome.ok:
                    return outcome
                tokens.append(outcome.value)
                continue
            elif look_ch == '(':
                tokens.append(Token.number(-1))
                tokens.append(Token.operator('*'))
                i += 1
                continue
            # 其余情况按普通减号处理

        if ch in DIGITS or ch == '.':
            outcome, i = _read_numeral(text, i)
            if not outcome.ok:
                return outcome
            tokens.append(outcome.value)
            continue

        if ch in OPERATOR_DEFINITIONS:
            tokens.append(Token.operator(ch))
            i += 1
            continue

        if ch == '(':
            tokens.append(Token.open_paren())
            i += 1
            continue

        if ch == ')':
            tokens.append(Token.close_paren())
            i += 1
            continue

        logger.debug(f"Invalid character {ch!r} at position {i}")
        return Outcome.failure(ErrorCode.INVALID_CHAR)

    return Outcome.success(tokens)
