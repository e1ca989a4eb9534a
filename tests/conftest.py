"""
Pytest fixtures shared by the Sacred Geometry test suite.
"""

import ast
from collections.abc import Callable

import pytest
from sacred_geometry.core.utils import trunc_div


def _standard_precedence_value(expression: str) -> int:
    """Evaluates text with conventional precedence and truncating division."""

    def _eval(node: ast.AST) -> int:
        if isinstance(node, ast.Expression):
            return _eval(node.body)
        if isinstance(node, ast.Constant) and isinstance(node.value, int):
            return node.value
        if isinstance(node, ast.UnaryOp) and isinstance(node.op, ast.USub):
            return -_eval(node.operand)
        if isinstance(node, ast.BinOp):
            left, right = _eval(node.left), _eval(node.right)
            if isinstance(node.op, ast.Add):
                return left + right
            if isinstance(node.op, ast.Sub):
                return left - right
            if isinstance(node.op, ast.Mult):
                return left * right
            if isinstance(node.op, ast.Div):
                return trunc_div(left, right)
        raise ValueError(f"Illegal expression: {type(node).__name__}")

    return _eval(ast.parse(expression, mode="eval"))


@pytest.fixture
def standard_precedence() -> Callable[[str], int]:
    """Re-reads a rendered expression with standard operator precedence."""
    return _standard_precedence_value


@pytest.fixture
def full_dice() -> list[int]:
    """One die of every face, enough to reach the level 1 and 2 primes."""
    return [1, 2, 3, 4, 5, 6]
