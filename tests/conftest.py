"""测试公共夹具"""
import pytest

from core import RPNEvaluator
from formula import FormulaEvaluator


@pytest.fixture
def calculator():
    """刚开机的计算器"""
    return RPNEvaluator()


@pytest.fixture
def formula_evaluator():
    return FormulaEvaluator(cache_size=4)
