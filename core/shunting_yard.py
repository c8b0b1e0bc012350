"""core/shunting_yard.py - 中缀Token序列转RPN"""
import logging

from core.result import Outcome, ErrorCode
from core.token_system import TokenType, OPERATOR_DEFINITIONS

logger = logging.getLogger(__name__)


def _should_pop(top, incoming):
    """栈顶操作符优先级更高，或相等且新操作符左结合时出栈"""
    top_info = OPERATOR_DEFINITIONS.get(top.value)
    in_info = OPERATOR_DEFINITIONS.get(incoming.value)
    # 未知符号留给求值阶段报 UnknownOp
    if top_info is None or in_info is None:
        return False
    if top_info.precedence > in_info.precedence:
        return True
    return top_info.precedence == in_info.precedence and not in_info.right_assoc


def to_rpn(tokens):
    """
    调度场算法：按优先级把中缀Token重排为后缀（RPN）顺序

    Args:
        tokens: tokenize 产生的Token列表
    Returns:
        Outcome，成功时为RPN Token列表
    """
    output = []
    stack = []  # 操作符与 '(' 栈

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(token)

        elif token.type == TokenType.OPERATOR:
            while stack and stack[-1].type == TokenType.OPERATOR and _should_pop(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)

        elif token.type == TokenType.OPEN_PAREN:
            stack.append(token)

        elif token.type == TokenType.CLOSE_PAREN:
            found = False
            while stack:
                top = stack.pop()
                if top.type == TokenType.OPEN_PAREN:
                    found = True
                    break
                output.append(top)
            if not found:
                logger.debug("Unmatched ')' in token stream")
                return Outcome.failure(ErrorCode.PAREN_MISMATCH)

    # 剩余操作符按栈顶优先的顺序输出
    while stack:
        top = stack.pop()
        if top.type in (TokenType.OPEN_PAREN, TokenType.CLOSE_PAREN):
            logger.debug("Unclosed '(' in token stream")
            return Outcome.failure(ErrorCode.PAREN_MISMATCH)
        output.append(top)

    return Outcome.success(output)
