"""core/result.py - 求值结果与错误码"""
from enum import Enum


class ErrorCode(Enum):
    """封闭的错误码集合，取值即对外稳定的标识符"""
    BAD_NUMBER = "BadNumber"  # 数字中出现多个小数点
    INVALID_CHAR = "InvalidChar"  # 非法字符
    PAREN_MISMATCH = "ParenMismatch"  # 括号不匹配
    SYNTAX = "Syntax"  # 操作数不足或栈中剩余值不为1
    DIV_ZERO = "DivZero"  # 除数为0
    UNKNOWN_OP = "UnknownOp"  # 未知操作符（理论上不可达）
    MATH_ERR = "MathErr"  # 结果为 NaN 或无穷


class Outcome:
    """
    每个阶段的返回值：要么是继续处理的值，要么是一个错误码，二者只取其一
    """

    __slots__ = ("value", "error")

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, code):
        return cls(error=ErrorCode(code))

    @property
    def ok(self):
        return self.error is None

    def __eq__(self, other):
        if not isinstance(other, Outcome):
            return NotImplemented
        return self.value == other.value and self.error == other.error

    def __repr__(self):
        if self.ok:
            return f"Outcome(value={self.value!r})"
        return f"Outcome(error={self.error.value})"


class CalcError(Exception):
    """仅供偏好异常的调用方使用，携带错误码"""

    def __init__(self, code):
        self.code = ErrorCode(code)
        super().__init__(self.code.value)
