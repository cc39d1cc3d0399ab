"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.token_system import TokenType, format_tokens
from core.operators import Operators
from core.results import Result, ErrorKind

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _invalid_expression(message):
        logger.debug(message)
        return Result.fail(ErrorKind.INVALID_EXPRESSION, "Invalid expression")

    @staticmethod
    def evaluate(token_sequence):
        """
        评估RPN表达式
        Args:
            token_sequence: to_rpn() 输出的后缀 Token 序列
        Returns:
            Result，成功时 value 为 float；失败类型为
            INVALID_EXPRESSION / DIVISION_BY_ZERO / INVALID_RESULT
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(Operators.to_number(token.text))

            # ================== 一元操作符处理 ==================
            elif token.type == TokenType.PERCENT:
                if len(stack) < token.arity:
                    return RPNEvaluator._invalid_expression(f"Insufficient operands for {token.name}")
                stack.append(Operators.percent(stack.pop()))

            # ================== 二元操作符处理 ==================
            elif token.type == TokenType.OPERATOR:
                if len(stack) < token.arity:
                    return RPNEvaluator._invalid_expression(f"Insufficient operands for {token.name}")
                operand2 = stack.pop()
                operand1 = stack.pop()

                if token.name == 'div' and Operators.is_zero(operand2):
                    logger.debug(f"Division by zero at position {token.position}")
                    return Result.fail(ErrorKind.DIVISION_BY_ZERO, "Division by zero",
                                       position=token.position)

                op_method = getattr(Operators, token.name)
                stack.append(op_method(operand1, operand2))

            else:
                # 括号不应出现在后缀序列中
                return RPNEvaluator._invalid_expression(f"Unexpected token in RPN: {token!r}")

        if len(stack) != 1:
            return RPNEvaluator._invalid_expression(
                f"Stack has {len(stack)} elements after evaluation, expected 1 "
                f"(RPN: {format_tokens(token_sequence)})")

        result = stack[0]
        if not Operators.is_finite(result):
            logger.debug(f"Non-finite result: {result}")
            return Result.fail(ErrorKind.INVALID_RESULT, "Invalid result")

        return Result.ok(float(result))
