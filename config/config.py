"""配置文件"""

# 求值器参数
EVALUATOR_CONFIG = {
    "cache_size": 1000,  # ExpressionEvaluator 的 LRU 缓存条数
}

# 显示参数
DISPLAY_CONFIG = {
    "error_text": "Error",       # 任何失败统一显示
    "empty_text": "0",           # 表达式为空时的显示
    "max_fraction_digits": 12,   # 小数位上限，避免 0.1+0.2 显示成 0.30000000000000004
}

# 计算器会话参数
SESSION_CONFIG = {
    "memory_initial": 0.0,
}

# 日志
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert EVALUATOR_CONFIG["cache_size"] > 0, "cache_size 必须为正"
    assert DISPLAY_CONFIG["max_fraction_digits"] >= 0, "max_fraction_digits 不能为负"
    assert DISPLAY_CONFIG["error_text"], "error_text 不能为空"
    assert LOGGING_CONFIG["level"] in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
    return True
