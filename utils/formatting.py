"""utils/formatting.py"""
import numpy as np

from config.config import DISPLAY_CONFIG


def format_number(value, max_fraction_digits=None):
    """
    数值 -> 字符串，始终使用定点表示（不输出 1e-05 这种指数形式）。
    不指定 max_fraction_digits 时输出能唯一还原该 float 的最短数字串，
    evaluate() 解析后得到完全相同的值，可用于表达式链式计算。
    """
    value = float(value)
    if not np.isfinite(value):
        return DISPLAY_CONFIG["error_text"]

    if max_fraction_digits is None:
        text = np.format_float_positional(value, unique=True, trim='-')
    else:
        text = np.format_float_positional(value, precision=max_fraction_digits,
                                          unique=True, fractional=True, trim='-')
    if text in ('-0', '-0.'):
        return '0'
    return text


def format_display(value):
    """结果行显示：小数位截断到 DISPLAY_CONFIG['max_fraction_digits']，只用于展示"""
    return format_number(value, DISPLAY_CONFIG["max_fraction_digits"])


def format_result(result):
    """Result -> 显示字符串，失败时显示统一的错误文本"""
    if not result.is_ok:
        return DISPLAY_CONFIG["error_text"]
    return format_display(result.value)
