"""core/operators.py"""
import numpy as np
import logging

PERCENT_DIVISOR = 100.0

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合，方法名与 Token.name 一致"""

    @staticmethod
    def to_number(text):
        """数字 token 文本 -> float64（'5.'、'.5' 都合法）"""
        return np.float64(text)

    # 一元操作符====================

    @staticmethod
    def percent(operand):
        """后缀百分号：x% = x / 100"""
        return np.float64(operand) / PERCENT_DIVISOR

    # 二元操作符========================================
    # 溢出和无效运算只产生 inf/nan，由求值器在最后统一检查

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(over='ignore', invalid='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符；除数为零的情况调用方需先行拦截"""
        with np.errstate(over='ignore', invalid='ignore', divide='ignore'):
            return np.float64(operand1) / np.float64(operand2)

    @staticmethod
    def is_zero(value):
        return np.float64(value) == 0.0

    @staticmethod
    def is_finite(value):
        return bool(np.isfinite(value))
