"""计算器模块 - 会话状态和批量求值"""
from .session import CalculatorSession
from .evaluator import ExpressionEvaluator

__all__ = ['CalculatorSession', 'ExpressionEvaluator']
