"""core/results.py - 求值结果与错误分类"""
from enum import Enum


class ErrorKind(Enum):
    INVALID_CHARACTER = "invalid_character"          # 词法阶段：非法字符
    MISMATCHED_PARENTHESES = "mismatched_parentheses"  # 转换阶段：括号不匹配
    INVALID_EXPRESSION = "invalid_expression"        # 求值阶段：操作数不足或过多
    DIVISION_BY_ZERO = "division_by_zero"
    INVALID_RESULT = "invalid_result"                # 结果为 inf 或 nan


class Failure:
    """一次失败的描述：类型 + 信息（词法错误时附带字符和位置）"""

    def __init__(self, kind, message, position=None, char=None):
        self.kind = kind
        self.message = message
        self.position = position
        self.char = char

    def __eq__(self, other):
        if not isinstance(other, Failure):
            return NotImplemented
        return (self.kind, self.position, self.char) == (other.kind, other.position, other.char)

    def __hash__(self):
        return hash((self.kind, self.position, self.char))

    def __repr__(self):
        return f"Failure({self.kind.name}, {self.message!r})"

    def __str__(self):
        return self.message


class CalculationError(Exception):
    """Result.unwrap() 在失败时抛出"""

    def __init__(self, failure):
        super().__init__(failure.message)
        self.failure = failure

    @property
    def kind(self):
        return self.failure.kind


class Result:
    """
    各阶段的返回值：要么携带 value，要么携带 failure，二者只有其一。
    value 可以是 token 列表（词法/转换阶段）或数值（求值阶段）。
    """
    __slots__ = ("value", "failure")

    def __init__(self, value=None, failure=None):
        self.value = value
        self.failure = failure

    @classmethod
    def ok(cls, value):
        return cls(value=value)

    @classmethod
    def fail(cls, kind, message, position=None, char=None):
        return cls(failure=Failure(kind, message, position=position, char=char))

    @property
    def is_ok(self):
        return self.failure is None

    @property
    def kind(self):
        """失败类型，成功时为 None"""
        return None if self.failure is None else self.failure.kind

    def unwrap(self):
        if self.failure is not None:
            raise CalculationError(self.failure)
        return self.value

    def __repr__(self):
        if self.is_ok:
            return f"Result.ok({self.value!r})"
        return f"Result.fail({self.failure!r})"
