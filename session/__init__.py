"""会话模块 - 计算器状态与持久化"""
from .storage import JsonStorage
from .session import CalculatorSession

__all__ = ['JsonStorage', 'CalculatorSession']
