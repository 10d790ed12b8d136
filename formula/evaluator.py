import pandas as pd
import numpy as np
import logging
from collections import OrderedDict
from typing import Iterable, Optional

from core import (
    RPNEvaluator, RPNValidator, RPNError, EmptyStackError,
    IncompleteExpressionError, parse_formula
)
from config.config import EVALUATOR_CONFIG

logger = logging.getLogger(__name__)


class FormulaEvaluator:
    """对空白分隔的RPN公式字符串求值，带LRU结果缓存"""

    def __init__(self, cache_size: Optional[int] = None):
        self.cache_size = cache_size if cache_size is not None else EVALUATOR_CONFIG["cache_size"]
        # 使用有限大小的OrderedDict实现LRU缓存
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

    def cache_info(self) -> dict:
        return {
            "hits": self._cache_hits,
            "misses": self._cache_misses,
            "size": len(self._result_cache),
            "max_size": self.cache_size,
        }

    def evaluate(self, formula: str, allow_partial: Optional[bool] = None) -> float:
        """
        Args:
            formula: RPN公式字符串，如 "4 2 +"
            allow_partial: 是否允许部分表达式（栈中剩余多个元素时取栈顶），
                None 时使用 EVALUATOR_CONFIG["allow_partial"]
        Returns:
            求值结果
        Raises:
            RPNError: Token非法、操作数不足、除零、空公式或表达式不完整
        """
        if allow_partial is None:
            allow_partial = EVALUATOR_CONFIG["allow_partial"]
        cache_key = (' '.join(formula.split()), allow_partial)

        if cache_key in self._result_cache:
            # 移到末尾（最近使用）
            self._result_cache.move_to_end(cache_key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for formula: {formula[:50]}")
            return self._result_cache[cache_key]

        self._cache_misses += 1

        result = self._evaluate_impl(formula, allow_partial)
        self._result_cache[cache_key] = result
        self._manage_cache()
        return result

    def _evaluate_impl(self, formula: str, allow_partial: bool) -> float:
        calculator = RPNEvaluator()
        calculator.push_all(parse_formula(formula))

        if calculator.depth == 0:
            logger.warning(f"Empty formula: {formula!r}")
            raise EmptyStackError(f"Empty formula: {formula!r}")

        if calculator.depth > 1 and not allow_partial:
            logger.warning(f"Stack has {calculator.depth} elements after evaluation, expected 1")
            logger.debug(f"RPN expression: {formula}")
            raise IncompleteExpressionError(formula, calculator.depth)

        return calculator.value()

    def validate(self, formula: str) -> bool:
        """检查公式是否为完整的RPN表达式（只做语法和栈深度检查）"""
        try:
            token_sequence = parse_formula(formula)
        except RPNError:
            return False
        return RPNValidator.can_terminate(token_sequence)

    def evaluate_many(self, formulas: Iterable[str], allow_partial: Optional[bool] = None) -> pd.Series:
        """
        批量求值
        Returns:
            以公式为索引的float Series，失败的公式为NaN
        """
        formulas = list(formulas)
        results = []
        for formula in formulas:
            try:
                results.append(self.evaluate(formula, allow_partial=allow_partial))
            except RPNError as e:
                logger.warning(f"Error evaluating formula '{formula[:50]}': {type(e).__name__}: {e}")
                results.append(np.nan)

        return pd.Series(results, index=pd.Index(formulas, name="formula"), dtype=float)
