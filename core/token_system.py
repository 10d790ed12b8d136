"""core/token_system.py"""
import logging
import math
import numbers
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.exceptions import UnknownTokenError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    OPERAND = "operand"  # 操作数
    OPERATOR = "operator"  # 操作符


@dataclass(frozen=True)
class Token:
    type: TokenType
    name: str
    value: Optional[float] = None
    arity: int = 0
    symbol: Optional[str] = None


# Token定义字典：操作符符号 -> Token（name 即 Operators 中的方法名）
TOKEN_DEFINITIONS = {
    '+': Token(TokenType.OPERATOR, 'add', arity=2, symbol='+'),
    '-': Token(TokenType.OPERATOR, 'sub', arity=2, symbol='-'),
    '*': Token(TokenType.OPERATOR, 'mul', arity=2, symbol='*'),
    '/': Token(TokenType.OPERATOR, 'div', arity=2, symbol='/'),
}

# 数字字面量：整数、小数、科学计数法
_LITERAL_PATTERN = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')


def _operand(raw, value):
    return Token(TokenType.OPERAND, str(raw), value=value)


def _to_float(number):
    """数值转float；超出float范围的整数按符号取±inf"""
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


def _is_real(value):
    # bool 是 int 的子类，但不是合法的数字字面量
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def tokenize(raw):
    """
    将单个原始输入转换为Token
    Args:
        raw: Token实例、数值（int/float/numpy标量）或字符串
    Returns:
        Token
    Raises:
        UnknownTokenError: 不符合字面量/操作符语法
    """
    if isinstance(raw, Token):
        # 只接受操作符表中的Token，或值为实数的操作数Token
        if raw.type == TokenType.OPERATOR and raw in TOKEN_DEFINITIONS.values():
            return raw
        if raw.type == TokenType.OPERAND and _is_real(raw.value):
            return Token(TokenType.OPERAND, raw.name, value=_to_float(raw.value))
        logger.debug(f"Rejected token: {raw!r}")
        raise UnknownTokenError(raw)

    if _is_real(raw):
        return _operand(raw, _to_float(raw))

    if isinstance(raw, str):
        text = raw.strip()
        if text in TOKEN_DEFINITIONS:
            return TOKEN_DEFINITIONS[text]
        if _LITERAL_PATTERN.match(text):
            return _operand(text, float(text))

    logger.debug(f"Rejected token: {raw!r}")
    raise UnknownTokenError(raw)


def parse_formula(formula):
    """按空白切分RPN公式字符串并逐个转换为Token"""
    return [tokenize(part) for part in formula.split()]


class RPNValidator:
    """对完整Token序列做栈深度检查（不计算数值）"""

    @staticmethod
    def calculate_stack_size(token_sequence):
        """计算当前栈中的元素数量；操作数不足时返回None"""
        stack_size = 0
        for token in token_sequence:
            if token.type == TokenType.OPERAND:
                stack_size += 1
            else:
                if stack_size < token.arity:
                    return None
                stack_size = stack_size - token.arity + 1
        return stack_size

    @staticmethod
    def can_terminate(token_sequence):
        """检查是否可以终止：栈中恰好剩一个元素"""
        if not token_sequence:
            return False
        return RPNValidator.calculate_stack_size(token_sequence) == 1
