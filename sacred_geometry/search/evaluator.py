"""
Left-to-right expression evaluator.

Operators are applied strictly in sequence order, ignoring conventional
precedence. The rendered text adds parentheses so that reading it with
standard precedence gives the same value.
"""

from collections.abc import Sequence

from sacred_geometry.core.constants import (
    ADDITIVE_SYMBOLS,
    MULTIPLICATIVE_SYMBOLS,
    OPERATOR_SYMBOLS,
)
from sacred_geometry.core.utils import trunc_div


def evaluate(
    operands: Sequence[int],
    operators: Sequence[str],
) -> tuple[int, str] | None:
    """
    Evaluates operands and operators from left to right.

    Each operator combines the running total with the next operand. Division
    truncates toward zero. When the operator before a multiplicative one
    was additive (the first step counts as "+"), the text built so far is
    wrapped in parentheses.

    Args:
        operands (Sequence[int]): The operands, in evaluation order.
        operators (Sequence[str]): One operator symbol fewer than operands.

    Returns:
        tuple[int, str] | None:
            The result and its rendering, (0, "") for no operands, or None
            when a division by zero rejects the combination.

    Raises:
        ValueError: If the operator count does not match the operands, or
            an operator symbol is unknown.

    """
    if not operands:
        return 0, ""
    if len(operators) != len(operands) - 1:
        raise ValueError(
            f"Expected {len(operands) - 1} operators for {len(operands)} "
            f"operands, got {len(operators)}"
        )

    result = operands[0]
    expression = str(result)
    previous = "+"
    for operator, operand in zip(operators, operands[1:]):
        if operator == "+":
            result += operand
        elif operator == "-":
            result -= operand
        elif operator == "*":
            result *= operand
        elif operator == "/":
            if operand == 0:
                return None
            result = trunc_div(result, operand)
        else:
            raise ValueError(
                f"Unknown operator '{operator}', expected one of {OPERATOR_SYMBOLS}"
            )

        if previous in ADDITIVE_SYMBOLS and operator in MULTIPLICATIVE_SYMBOLS:
            expression = f"({expression}) {operator} {operand}"
        else:
            expression = f"{expression} {operator} {operand}"
        previous = operator

    return result, expression
