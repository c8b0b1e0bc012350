"""utils/labels.py - 错误码到用户可见文案的映射"""
from core.result import ErrorCode

# 错误码 -> (短文案, 长文案)
ERROR_LABELS = {
    ErrorCode.BAD_NUMBER: ("Bad number", "A number contains more than one decimal point."),
    ErrorCode.INVALID_CHAR: ("Invalid", "The expression contains an unsupported character."),
    ErrorCode.PAREN_MISMATCH: ("Parens?", "Parentheses are not balanced."),
    ErrorCode.SYNTAX: ("Error", "An operator is missing an operand, or operands are missing an operator."),
    ErrorCode.DIV_ZERO: ("Div/0", "Division by zero."),
    ErrorCode.UNKNOWN_OP: ("Error", "Unknown operator."),
    ErrorCode.MATH_ERR: ("Math error", "The result is not a finite number."),
}


def describe_error(code, verbose=False):
    """返回错误码对应的文案；code 可以是 ErrorCode 或其字符串标识"""
    short, long = ERROR_LABELS[ErrorCode(code)]
    return long if verbose else short
