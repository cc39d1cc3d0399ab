"""词法分析 - 字符串 -> Token序列"""
import logging

from core.token_system import Token, TOKEN_DEFINITIONS, NUMBER_CHARS
from core.results import Result, ErrorKind

logger = logging.getLogger(__name__)


def _invalid_character(char, position):
    logger.debug(f"Invalid character {char!r} at position {position}")
    return Result.fail(ErrorKind.INVALID_CHARACTER,
                       f"Invalid character: {char!r} at position {position}",
                       position=position, char=char)


def tokenize(text):
    """
    把中缀表达式切分为 token。
    Args:
        text: 原始表达式字符串
    Returns:
        Result，成功时 value 为 Token 列表；遇到非法字符时返回 INVALID_CHARACTER
    """
    tokens = []
    i, n = 0, len(text)

    while i < n:
        ch = text[i]
        if ch.isspace():
            i += 1
            continue

        # 数字：最长的 [0-9.] 串
        if ch in NUMBER_CHARS:
            start = i
            dot_position = None
            has_digit = False
            while i < n and text[i] in NUMBER_CHARS:
                if text[i] == '.':
                    if dot_position is not None:
                        # 第二个小数点，例如 1.2.3
                        return _invalid_character('.', i)
                    dot_position = i
                else:
                    has_digit = True
                i += 1
            if not has_digit:
                return _invalid_character('.', dot_position)
            tokens.append(Token.number(text[start:i], position=start))
            continue

        prototype = TOKEN_DEFINITIONS.get(ch)
        if prototype is None:
            return _invalid_character(ch, i)
        tokens.append(prototype.at(i))
        i += 1

    return Result.ok(tokens)
