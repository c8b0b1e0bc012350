"""utils/formatting.py"""
import numpy as np


def format_result(value):
    """
    结果显示格式：整数不带小数部分，不使用科学计数法，-0 显示为 0
    """
    value = np.float64(value)
    if value == 0:
        return "0"
    return np.format_float_positional(value, trim='-')
