"""core/operators.py"""
import numpy as np
import logging

from core.exceptions import DivisionByZeroError

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合"""

    @staticmethod
    def _as_float64(operand1, operand2):
        """统一转换为float64"""
        return np.float64(operand1), np.float64(operand2)

    # 二元操作符========================================

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 + operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符：operand1 - operand2"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 - operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符（溢出时得到±inf，不裁剪）"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 * operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：operand1 / operand2，除数为零时报错"""
        operand1, operand2 = Operators._as_float64(operand1, operand2)
        if operand2 == 0:
            logger.warning(f"Division by zero: {operand1} / {operand2}")
            raise DivisionByZeroError(float(operand1))

        with np.errstate(over='ignore', under='ignore', invalid='ignore'):
            return float(operand1 / operand2)
