"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from core.result import Outcome, ErrorCode
from core.token_system import TokenType, OPERATOR_DEFINITIONS
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        单栈从左到右求值RPN序列

        Args:
            token_sequence: to_rpn 输出的Token列表
        Returns:
            Outcome，成功时为 float64 标量（尚未做有限性检查和精度归一化）
        """
        stack = []

        # 溢出得到 inf、0取模得到 NaN，由调用方统一报 MathErr
        with np.errstate(all='ignore'):
            for token in token_sequence:
                if token.type == TokenType.NUMBER:
                    stack.append(np.float64(token.value))
                    continue

                if token.type != TokenType.OPERATOR:
                    # 括号不应出现在RPN中
                    logger.debug(f"Unexpected token in RPN: {token!r}")
                    return Outcome.failure(ErrorCode.SYNTAX)

                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token.value!r}")
                    return Outcome.failure(ErrorCode.SYNTAX)

                operand2 = stack.pop()
                operand1 = stack.pop()

                info = OPERATOR_DEFINITIONS.get(token.value)
                op_method = getattr(Operators, info.name, None) if info else None
                if op_method is None:
                    logger.error(f"Unknown binary operator: {token.value!r}")
                    return Outcome.failure(ErrorCode.UNKNOWN_OP)

                result = op_method(operand1, operand2)
                if not result.ok:
                    return result
                stack.append(result.value)

        if len(stack) != 1:
            logger.debug(f"Expected exactly one value after evaluation, got {len(stack)}")
            return Outcome.failure(ErrorCode.SYNTAX)

        return Outcome.success(stack[0])
