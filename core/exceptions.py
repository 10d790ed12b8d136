"""core/exceptions.py - RPN计算器的异常体系"""


class RPNError(Exception):
    """所有RPN求值错误的基类"""


class UnknownTokenError(RPNError, ValueError):
    """无法识别的Token（既不是数字字面量也不是已知操作符）"""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Unknown token: {token!r}")


class InsufficientOperandsError(RPNError):
    """操作符所需的操作数不足"""

    def __init__(self, operator, required, available):
        self.operator = operator
        self.required = required
        self.available = available
        super().__init__(
            f"Operator {operator!r} needs {required} operands, stack has {available}"
        )


class DivisionByZeroError(RPNError, ZeroDivisionError):
    """除数为零"""

    def __init__(self, dividend):
        self.dividend = dividend
        super().__init__(f"Division by zero: {dividend} / 0")


class EmptyStackError(RPNError):
    """栈为空时读取结果"""

    def __init__(self, message="Stack is empty, nothing has been pushed"):
        super().__init__(message)


class IncompleteExpressionError(RPNError):
    """公式求值结束后栈中剩余多个元素"""

    def __init__(self, formula, stack_size):
        self.formula = formula
        self.stack_size = stack_size
        super().__init__(
            f"Stack has {stack_size} elements after evaluating {formula!r}, expected 1"
        )
