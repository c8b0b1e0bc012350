"""核心模块 - Token系统、调度场转换、RPN求值器和操作符"""
from .result import ErrorCode, Outcome, CalcError
from .token_system import TokenType, Token, OPERATOR_DEFINITIONS, tokenize
from .rewriter import rewrite_percent, insert_implicit_multiplication
from .shunting_yard import to_rpn
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .engine import evaluate, evaluate_or_raise, normalize

__all__ = [
    'ErrorCode', 'Outcome', 'CalcError',
    'TokenType', 'Token', 'OPERATOR_DEFINITIONS', 'tokenize',
    'rewrite_percent', 'insert_implicit_multiplication',
    'to_rpn', 'RPNEvaluator', 'Operators',
    'evaluate', 'evaluate_or_raise', 'normalize',
]
