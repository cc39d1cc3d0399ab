import pandas as pd
import numpy as np
import logging
from collections import OrderedDict
from typing import Iterable, Optional

from core import evaluate, Result
from config.config import EVALUATOR_CONFIG
from utils.formatting import format_result

logger = logging.getLogger(__name__)


class ExpressionEvaluator:

    def __init__(self, cache_size: Optional[int] = None):
        if cache_size is None:
            cache_size = EVALUATOR_CONFIG['cache_size']
        # 使用有限大小的OrderedDict实现LRU缓存
        self.cache_size = cache_size
        self._result_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._result_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._result_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._result_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {'hits': self._cache_hits, 'misses': self._cache_misses,
                'size': len(self._result_cache)}

    def evaluate(self, expression: str) -> Result:
        """
        Args:
            expression: 中缀表达式
        Returns:
            core.evaluate 的 Result（失败同样缓存，相同输入结果相同）
        """
        cache_key = expression or ''

        if cache_key in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {cache_key[:50]}")
            return self._result_cache[cache_key]

        self._cache_misses += 1
        result = evaluate(cache_key)
        self._result_cache[cache_key] = result
        self._manage_cache()
        return result

    def evaluate_many(self, expressions: Iterable[str]) -> pd.DataFrame:
        """
        批量求值。
        Returns:
            DataFrame，列为 expression / value / error / display；
            失败行 value 为 NaN，error 为 ErrorKind 的取值
        """
        expressions = pd.Series(list(expressions), dtype=object, name='expression')
        results = [self.evaluate(expr) for expr in expressions]

        frame = pd.DataFrame({
            'expression': expressions,
            'value': [r.value if r.is_ok else np.nan for r in results],
            'error': [None if r.is_ok else r.kind.value for r in results],
            'display': [format_result(r) for r in results],
        })

        failed = int(frame['error'].notna().sum())
        if failed:
            logger.warning(f"{failed} of {len(frame)} expressions failed")
        return frame
