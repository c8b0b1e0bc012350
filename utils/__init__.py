"""工具模块"""
from .labels import ERROR_LABELS, describe_error
from .formatting import format_result

__all__ = ['ERROR_LABELS', 'describe_error', 'format_result']
