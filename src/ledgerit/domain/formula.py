"""Reimbursement formula evaluation.

A formula is an arithmetic expression over a single variable, ``amount``,
which is bound to the absolute value of the transaction amount. Formulas
are parsed with :mod:`ast` and only arithmetic nodes are accepted.
"""

import ast
import operator
from decimal import Decimal, DecimalException
from typing import Callable

from ledgerit.domain.entities import quantize_amount
from ledgerit.domain.errors import FormulaError

VARIABLE = "amount"

_BINARY_OPS = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.Mod: operator.mod,
    ast.Pow: operator.pow,
}

_UNARY_OPS = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

_FUNCTIONS = {
    "abs": abs,
    "min": min,
    "max": max,
    "round": lambda value, places=0: round(value, int(places)),
}


def _check(node: ast.AST, text: str) -> None:
    if isinstance(node, ast.Expression):
        _check(node.body, text)
    elif isinstance(node, ast.BinOp) and type(node.op) in _BINARY_OPS:
        _check(node.left, text)
        _check(node.right, text)
    elif isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPS:
        _check(node.operand, text)
    elif isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise FormulaError(f"Unsupported constant {node.value!r} in formula '{text}'")
    elif isinstance(node, ast.Name):
        if node.id != VARIABLE:
            raise FormulaError(f"Unknown name '{node.id}' in formula '{text}'")
    elif isinstance(node, ast.Call):
        if not isinstance(node.func, ast.Name) or node.func.id not in _FUNCTIONS or node.keywords:
            raise FormulaError(f"Unsupported function call in formula '{text}'")
        for arg in node.args:
            _check(arg, text)
    else:
        raise FormulaError(f"Unsupported syntax '{type(node).__name__}' in formula '{text}'")


def _evaluate(node: ast.AST, amount: Decimal) -> Decimal:
    if isinstance(node, ast.Expression):
        return _evaluate(node.body, amount)
    if isinstance(node, ast.BinOp):
        return _BINARY_OPS[type(node.op)](_evaluate(node.left, amount), _evaluate(node.right, amount))
    if isinstance(node, ast.UnaryOp):
        return _UNARY_OPS[type(node.op)](_evaluate(node.operand, amount))
    if isinstance(node, ast.Constant):
        return Decimal(str(node.value))
    if isinstance(node, ast.Name):
        return amount
    return Decimal(_FUNCTIONS[node.func.id](*(_evaluate(arg, amount) for arg in node.args)))


def compile_formula(text: str) -> Callable[[Decimal], Decimal]:
    """Compile a formula into a callable taking the amount.

    Raises:
        FormulaError: If the text is not a supported arithmetic expression
    """
    if not text or not text.strip():
        raise FormulaError("Formula is empty")
    try:
        tree = ast.parse(text.strip(), mode="eval")
    except SyntaxError as e:
        raise FormulaError(f"Could not parse formula '{text}': {e.msg}") from e
    _check(tree, text)

    def evaluate(amount: Decimal) -> Decimal:
        try:
            return _evaluate(tree, Decimal(amount))
        except (DecimalException, ArithmeticError, TypeError, ValueError) as e:
            raise FormulaError(f"Could not evaluate formula '{text}': {e!r}") from e

    return evaluate


def evaluate_reimbursement(formula: str, amount: Decimal) -> Decimal:
    """Evaluate a formula against the absolute amount, rounded to cents.

    Raises:
        FormulaError: If the formula is malformed or its result is not a
            finite amount that fits in cents
    """
    value = compile_formula(formula)(abs(amount))
    if not value.is_finite():
        raise FormulaError(f"Formula '{formula}' does not give a finite amount")
    try:
        return quantize_amount(value)
    except DecimalException as e:
        raise FormulaError(f"Formula '{formula}' gives an amount too large to record") from e
