"""核心模块 - Token系统、RPN求值器、操作符和异常"""
from .exceptions import (
    RPNError, UnknownTokenError, InsufficientOperandsError,
    DivisionByZeroError, EmptyStackError, IncompleteExpressionError
)
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, RPNValidator,
    tokenize, parse_formula
)
from .rpn_evaluator import RPNEvaluator
from .operators import Operators

__all__ = [
    'RPNError', 'UnknownTokenError', 'InsufficientOperandsError',
    'DivisionByZeroError', 'EmptyStackError', 'IncompleteExpressionError',
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'RPNValidator',
    'tokenize', 'parse_formula',
    'RPNEvaluator', 'Operators'
]
