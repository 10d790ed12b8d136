"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
from core.token_system import TokenType, tokenize
from core.operators import Operators
from core.exceptions import EmptyStackError, InsufficientOperandsError, UnknownTokenError

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """逐个接收Token并维护操作数栈的RPN计算器"""

    def __init__(self):
        self._stack = []

    @property
    def depth(self):
        """栈中元素数量"""
        return len(self._stack)

    @property
    def stack(self):
        """栈快照（栈底在前）"""
        return tuple(self._stack)

    def push(self, token):
        """
        压入一个Token
        Args:
            token: 数字字面量或操作符符号（'+', '-', '*', '/'）
        Raises:
            UnknownTokenError: 无法识别的Token
            InsufficientOperandsError: 操作数不足两个
            DivisionByZeroError: 除数为零
        失败时栈保持不变。
        """
        try:
            token = tokenize(token)
        except UnknownTokenError:
            logger.warning(f"Unknown token: {token!r}")
            raise

        # ================== 操作数 ==================
        if token.type == TokenType.OPERAND:
            self._stack.append(token.value)
            logger.debug(f"Pushed {token.value}, depth={len(self._stack)}")
            return

        # ================== 二元操作符 ==================
        if len(self._stack) < token.arity:
            logger.warning(f"Insufficient operands for {token.symbol}")
            raise InsufficientOperandsError(token.symbol, token.arity, len(self._stack))

        # 先计算再出栈，保证失败时栈不被修改
        operand1, operand2 = self._stack[-2], self._stack[-1]
        result = getattr(Operators, token.name)(operand1, operand2)

        del self._stack[-2:]
        self._stack.append(result)
        logger.debug(f"{operand1} {token.symbol} {operand2} = {result}")

    def push_all(self, tokens):
        """按顺序压入多个Token，遇到第一个错误即停止（之前的压入保留）"""
        for token in tokens:
            self.push(token)

    def value(self):
        """返回栈顶元素（不出栈）"""
        if not self._stack:
            logger.warning("Value requested from an empty stack")
            raise EmptyStackError()
        return self._stack[-1]

    def clear(self):
        """清空栈，回到刚开机的状态"""
        self._stack.clear()
