"""core/operators.py"""
import numpy as np

from core.result import Outcome, ErrorCode


class Operators:
    """所有二元操作符的静态方法集合，操作数与结果均为 float64"""

    @staticmethod
    def add(a, b):
        return Outcome.success(np.float64(a) + np.float64(b))

    @staticmethod
    def sub(a, b):
        return Outcome.success(np.float64(a) - np.float64(b))

    @staticmethod
    def mul(a, b):
        return Outcome.success(np.float64(a) * np.float64(b))

    @staticmethod
    def div(a, b):
        """除数恰好为0时报 DivZero"""
        if b == 0:
            return Outcome.failure(ErrorCode.DIV_ZERO)
        return Outcome.success(np.float64(a) / np.float64(b))

    @staticmethod
    def mod(a, b):
        """
        浮点取模，结果符号跟随被除数（与C的fmod一致，不同于Python的 %）
        例如 -7 % 3 -> -1，7 % -3 -> 1；b 为0时结果为 NaN，最终报 MathErr
        """
        return Outcome.success(np.fmod(np.float64(a), np.float64(b)))
