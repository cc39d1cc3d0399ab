"""数据加载模块 - 批量表达式输入"""
import pandas as pd
import logging

logger = logging.getLogger(__name__)


def load_expressions(file_path, column='expression'):
    """
    加载待求值的表达式列表。

    Parameters:
    - file_path: .csv 文件（按列读取）或纯文本文件（每行一个表达式，跳过空行）
    - column: CSV 中表达式所在列名, 默认为 'expression'

    Returns:
    - pd.Series (dtype=str)，name 为 'expression'
    """
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        # 全部按字符串读取，避免 "007" 之类被转成数字
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in frame.columns:
            raise ValueError(f"Column '{column}' not found in {file_path}. "
                             f"Available columns: {list(frame.columns)}")
        expressions = frame[column]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.strip() for line in f]
        expressions = pd.Series([line for line in lines if line], dtype=str)

    expressions = expressions.reset_index(drop=True).rename('expression')
    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions
