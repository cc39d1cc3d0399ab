"""表达式求值入口：一元负号预处理 -> 词法 -> 调度场 -> RPN求值"""
import re
import logging

from core.tokenizer import tokenize
from core.shunting_yard import to_rpn
from core.rpn_evaluator import RPNEvaluator
from core.results import Result

logger = logging.getLogger(__name__)

_PAREN_MINUS = re.compile(r'\(-')
_LEADING_MINUS = re.compile(r'^-')


def normalize_unary_minus(expression):
    """
    只处理两种一元负号：
    - 字符串开头的 '-'   -> '0-'
    - 紧跟 '(' 的 '-'    -> '(0-'
    其他位置（如 2*-3）不处理，会在求值阶段报 INVALID_EXPRESSION
    """
    expression = _PAREN_MINUS.sub('(0-', expression)
    return _LEADING_MINUS.sub('0-', expression)


def evaluate(expression):
    """
    Args:
        expression: 中缀表达式字符串，可以为空
    Returns:
        Result，成功时 value 为 float；空串或纯空白返回 0
    """
    if expression is None or not expression.strip():
        return Result.ok(0.0)

    normalized = normalize_unary_minus(expression.strip())

    tokens = tokenize(normalized)
    if not tokens.is_ok:
        return tokens

    rpn = to_rpn(tokens.value)
    if not rpn.is_ok:
        return rpn

    result = RPNEvaluator.evaluate(rpn.value)
    if not result.is_ok:
        logger.debug(f"Evaluation of {expression!r} failed: {result.failure.kind.name}")
    return result
