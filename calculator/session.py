"""calculator/session.py - 计算器会话：表达式缓冲区、内存寄存器、按键处理"""
import re
import logging

import numpy as np

from core import evaluate, OPERATOR_SYMBOLS
from config.config import DISPLAY_CONFIG, SESSION_CONFIG
from utils.formatting import format_number, format_display

logger = logging.getLogger(__name__)

_TRAILING_NUMBER_PART = re.compile(r'(\d*\.?\d*)$')
_TRAILING_NUMBER = re.compile(r'(\d*\.?\d+)$')


class CalculatorSession:
    """
    界面层的全部状态都在这里（当前表达式、内存、上次结果），
    core.evaluate 只接收表达式字符串，不读写这些状态。
    """

    # 按键 -> 方法名；单字符的数字/运算符/括号由 press() 直接追加
    KEY_BINDINGS = {
        'Enter': 'equals', '=': 'equals',
        'Backspace': 'backspace',
        'Escape': 'clear', 'c': 'clear',
        '%': 'percent',
        's': 'sqrt',
        'm': 'memory_recall',
        'mr': 'memory_recall',
        'mc': 'memory_clear',
        'm+': 'memory_add',
        'm-': 'memory_subtract',
    }
    INPUT_CHARS = frozenset('0123456789.()') | OPERATOR_SYMBOLS

    def __init__(self, memory=None):
        self.expression = ''
        self.memory = SESSION_CONFIG['memory_initial'] if memory is None else float(memory)
        self.last_result = None
        self.error = False
        self.flash = None  # 内存操作的短暂提示：'M+' / 'M-' / 'MC' / 'Error'

    # ---------- 输入 ----------
    def append(self, text):
        """追加一个字符，带基本的输入约束"""
        if text == '.':
            # 当前数字里已有小数点则忽略
            current = _TRAILING_NUMBER_PART.search(self.expression).group(1)
            if '.' in current:
                return
        if text in OPERATOR_SYMBOLS:
            if not self.expression and text != '-':
                return
            if self.expression and self.expression[-1] in OPERATOR_SYMBOLS:
                # 连续运算符：用新的替换旧的
                self.expression = self.expression[:-1] + text
                return
        self.expression += text

    def backspace(self):
        self.expression = self.expression[:-1]

    def clear(self):
        """清空表达式和结果，内存保留"""
        self.expression = ''
        self.last_result = None
        self.error = False

    # ---------- 计算 ----------
    def _fail(self, reason):
        logger.info(f"Calculation failed: {reason}")
        self.error = True
        self.last_result = None
        self.expression = ''

    def _show(self, value):
        self.error = False
        self.last_result = value
        # 结果写回表达式，便于继续运算
        self.expression = format_number(value)

    def equals(self):
        """求值当前表达式；成功返回数值，失败返回 None 并进入错误状态"""
        result = evaluate(self.expression)
        if not result.is_ok:
            self._fail(result.failure)
            return None
        self._show(result.value)
        return result.value

    def percent(self):
        """把表达式末尾的数字 n 原地替换成 n/100（纯文本操作，与 % token 无关）"""
        match = _TRAILING_NUMBER.search(self.expression)
        if match is None:
            return
        number = match.group(1)
        replacement = format_number(float(number) / 100)
        self.expression = self.expression[:-len(number)] + replacement

    def sqrt(self):
        result = evaluate(self.expression or '0')
        if not result.is_ok:
            self._fail(result.failure)
            return None
        if result.value < 0:
            self._fail(f"square root of negative value {result.value}")
            return None
        value = float(np.sqrt(result.value))
        self._show(value)
        return value

    # ---------- 内存寄存器 ----------
    def memory_clear(self):
        self.memory = 0.0
        self.flash = 'MC'

    def memory_recall(self):
        self.error = False
        self.last_result = self.memory
        self.expression = format_number(self.memory)

    def _memory_combine(self, sign, label):
        result = evaluate(self.expression or '0')
        if not result.is_ok:
            logger.info(f"Memory operation {label} failed: {result.failure}")
            self.flash = DISPLAY_CONFIG['error_text']
            return
        self.memory += sign * result.value
        self.flash = label

    def memory_add(self):
        self._memory_combine(1.0, 'M+')

    def memory_subtract(self):
        self._memory_combine(-1.0, 'M-')

    # ---------- 显示与按键 ----------
    def display(self):
        """返回 (表达式行, 结果行)"""
        expression_line = self.expression or DISPLAY_CONFIG['empty_text']
        if self.error:
            result_line = DISPLAY_CONFIG['error_text']
        elif self.last_result is not None:
            result_line = format_display(self.last_result)
        else:
            result_line = ''
        return expression_line, result_line

    def press(self, key):
        """
        处理一次按键（键盘或按钮）。
        Returns:
            是否识别了该按键
        """
        self.flash = None
        if key in self.INPUT_CHARS:
            self.append(key)
            return True
        method_name = self.KEY_BINDINGS.get(key) or self.KEY_BINDINGS.get(key.lower())
        if method_name is None:
            logger.debug(f"Ignoring unknown key: {key!r}")
            return False
        getattr(self, method_name)()
        return True
