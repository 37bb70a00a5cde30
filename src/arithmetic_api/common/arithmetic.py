"""Binary arithmetic operations served by the API."""
from collections.abc import Callable as ABCCallable
import math
import operator
from typing import Any, Callable, Dict

from arithmetic_api.common.coercion import as_json_number, is_textual, to_number, to_string
from arithmetic_api.common.operations import Result


# Type alias for operation functions (taking two operands, returning a result)
OperationFn: ABCCallable[[Any, Any], Result] = Callable[[Any, Any], Result]


def divide_floats(dividend: float, divisor: float) -> float:
    """
    Divide two doubles using IEEE-754 semantics for a zero divisor.

    Python raises ZeroDivisionError where floating-point hardware returns a
    signed infinity or NaN, so the zero divisor case is resolved here.

    Examples:
        - 9 / 3 -> 3.0
        - 5 / 0 -> inf
        - -5 / 0 -> -inf
        - 5 / -0.0 -> -inf
        - 0 / 0 -> nan

    :param float dividend: Left-hand operand
    :param float divisor: Right-hand operand

    :return: Quotient
    :rtype: float
    """
    if divisor == 0:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return operator.truediv(dividend, divisor)


def _numeric(operation_fn: Callable[[float, float], float]) -> OperationFn:
    """Lift a double operation to one accepting any operand."""
    def apply(first: Any, second: Any) -> Result:
        return as_json_number(operation_fn(to_number(first), to_number(second)))

    return apply


def add(first: Any, second: Any) -> Result:
    """
    Add two operands, concatenating their text when either one is textual.

    :param Any first: Left-hand operand
    :param Any second: Right-hand operand

    :return: Sum, or concatenated text
    :rtype: Result
    """
    if is_textual(first) or is_textual(second):
        return to_string(first) + to_string(second)
    return as_json_number(to_number(first) + to_number(second))


subtract: OperationFn = _numeric(operator.sub)
multiply: OperationFn = _numeric(operator.mul)
divide: OperationFn = _numeric(divide_floats)

# Mapping of route names to operation functions
OPERATIONS: Dict[str, OperationFn] = {
    "sum": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
}


def compute(operation: str, first: Any, second: Any) -> Result:
    """
    Apply the named operation to two operands.

    Never fails on operand values: anything non-numeric ends up as NaN or,
    for sum, as concatenated text.

    :param str operation: Route name of the operation (sum, subtract, multiply, divide)
    :param Any first: Left-hand operand
    :param Any second: Right-hand operand

    :return: Operation result
    :rtype: Result
    :raises ValueError: If the operation name is unknown
    """
    try:
        operation_fn: OperationFn = OPERATIONS[operation]
    except KeyError:
        raise ValueError(f"Unsupported operation: {operation!r}") from None
    return operation_fn(first, second)
