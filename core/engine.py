"""求值流水线：百分号改写 -> 隐式乘法 -> 分词 -> 调度场 -> RPN求值 -> 精度归一化"""
import numpy as np
import logging

from config.config import ENGINE_CONFIG
from core.result import Outcome, ErrorCode, CalcError
from core.rewriter import rewrite_percent, insert_implicit_multiplication
from core.token_system import tokenize
from core.shunting_yard import to_rpn
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


def normalize(value):
    """非有限值报 MathErr；否则四舍五入到12位有效数字"""
    if not np.isfinite(value):
        return Outcome.failure(ErrorCode.MATH_ERR)
    digits = ENGINE_CONFIG["significant_digits"]
    text = np.format_float_positional(
        np.float64(value), precision=digits, unique=False, fractional=False, trim='-'
    )
    return Outcome.success(float(text))


def evaluate(expression):
    """
    求值一个算术表达式

    Args:
        expression: 任意字符串
    Returns:
        Outcome：成功时 value 为有限的 float，失败时 error 为 ErrorCode
    """
    if not expression.strip():
        return Outcome.success(ENGINE_CONFIG["empty_result"])

    prepared = insert_implicit_multiplication(rewrite_percent(expression))

    tokens = tokenize(prepared)
    if not tokens.ok:
        logger.debug(f"Tokenize failed for {expression!r}: {tokens.error.value}")
        return tokens

    rpn = to_rpn(tokens.value)
    if not rpn.ok:
        logger.debug(f"RPN conversion failed for {expression!r}: {rpn.error.value}")
        return rpn

    raw = RPNEvaluator.evaluate(rpn.value)
    if not raw.ok:
        logger.debug(f"Evaluation failed for {expression!r}: {raw.error.value}")
        return raw

    return normalize(raw.value)


def evaluate_or_raise(expression):
    """与 evaluate 相同，但失败时抛出 CalcError"""
    outcome = evaluate(expression)
    if not outcome.ok:
        raise CalcError(outcome.error)
    return outcome.value
