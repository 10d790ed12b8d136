"""Formula模块 - RPN公式字符串求值"""
from .evaluator import FormulaEvaluator

__all__ = ['FormulaEvaluator']
