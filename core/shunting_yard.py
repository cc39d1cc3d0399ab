"""中缀 -> 后缀(RPN) 转换，调度场算法"""
import logging

from core.token_system import TokenType, format_tokens
from core.results import Result, ErrorKind

logger = logging.getLogger(__name__)


def _mismatched(position=None):
    logger.debug(f"Mismatched parentheses (position={position})")
    return Result.fail(ErrorKind.MISMATCHED_PARENTHESES, "Mismatched parentheses",
                       position=position)


def to_rpn(token_sequence):
    """
    Args:
        token_sequence: tokenize() 产生的 Token 列表
    Returns:
        Result，成功时 value 为后缀顺序的 Token 列表（不含括号）
    操作数个数在这里不检查，交给求值阶段
    """
    output = []
    stack = []  # 操作符和左括号

    for token in token_sequence:
        if token.type in (TokenType.NUMBER, TokenType.PERCENT):
            # % 直接输出，求值时作用于栈顶的一个操作数
            output.append(token)

        elif token.type == TokenType.OPERATOR:
            # 优先级 >= 时先弹出，保证左结合：a-b-c == (a-b)-c
            while stack and stack[-1].is_operator and stack[-1].precedence >= token.precedence:
                output.append(stack.pop())
            stack.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            stack.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while stack and stack[-1].type != TokenType.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                return _mismatched(token.position)
            stack.pop()  # 丢弃 '('

    while stack:
        token = stack.pop()
        if token.type in (TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN):
            return _mismatched(token.position)
        output.append(token)

    logger.debug(f"RPN: {format_tokens(output)}")
    return Result.ok(output)
