"""核心模块 - Token系统、词法分析、调度场转换、RPN求值器和操作符"""
from .token_system import TokenType, Token, TOKEN_DEFINITIONS, OPERATOR_SYMBOLS
from .results import ErrorKind, Failure, Result, CalculationError
from .tokenizer import tokenize
from .shunting_yard import to_rpn
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .expression import evaluate, normalize_unary_minus

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'OPERATOR_SYMBOLS',
    'ErrorKind', 'Failure', 'Result', 'CalculationError',
    'tokenize', 'to_rpn', 'RPNEvaluator', 'Operators',
    'evaluate', 'normalize_unary_minus'
]
