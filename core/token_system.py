"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"            # 数字
    OPERATOR = "operator"        # 二元操作符 + - * /
    PERCENT = "percent"          # 后缀百分号
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"


class Token:
    def __init__(self, token_type, text, name=None, arity=0, precedence=0, position=None):
        self.type = token_type
        self.text = text
        self.name = name or text
        self.arity = arity
        self.precedence = precedence
        self.position = position  # 在输入字符串中的位置

    def at(self, position):
        """复制一个带位置信息的 token（TOKEN_DEFINITIONS 中的是原型）"""
        return Token(self.type, self.text, name=self.name, arity=self.arity,
                     precedence=self.precedence, position=position)

    @classmethod
    def number(cls, text, position=None):
        return cls(TokenType.NUMBER, text, name='number', position=position)

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.text == other.text

    def __hash__(self):
        return hash((self.type, self.text))

    def __repr__(self):
        return f"Token({self.type.name}, {self.text!r})"


# 单字符 token 定义
TOKEN_DEFINITIONS = {
    # 二元操作符：* / 优先级 2，+ - 优先级 1，全部左结合
    '+': Token(TokenType.OPERATOR, '+', name='add', arity=2, precedence=1),
    '-': Token(TokenType.OPERATOR, '-', name='sub', arity=2, precedence=1),
    '*': Token(TokenType.OPERATOR, '*', name='mul', arity=2, precedence=2),
    '/': Token(TokenType.OPERATOR, '/', name='div', arity=2, precedence=2),

    # 一元后缀操作符
    '%': Token(TokenType.PERCENT, '%', name='percent', arity=1),

    # 括号
    '(': Token(TokenType.LEFT_PAREN, '('),
    ')': Token(TokenType.RIGHT_PAREN, ')'),
}

OPERATOR_SYMBOLS = frozenset(s for s, t in TOKEN_DEFINITIONS.items() if t.type == TokenType.OPERATOR)
NUMBER_CHARS = frozenset('0123456789.')


def format_tokens(token_sequence):
    """以空格连接 token 文本，用于日志和调试"""
    return ' '.join(t.text for t in token_sequence)
