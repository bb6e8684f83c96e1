# evaluator.py
from __future__ import annotations
from typing import Dict, List, Mapping

from errors import EvalError
from parser import And, Const, Expr, Not, Or, Var, Xor

Assignment = Dict[str, bool]


def evaluate(expr: Expr, assignment: Mapping[str, bool]) -> bool:
    """
    Evaluate an expression tree under one assignment of its variables.

    Both operands of a binary node are always evaluated, so an unbound
    variable anywhere in the tree raises EvalError regardless of the
    values found on the other side.
    """
    if isinstance(expr, Var):
        if expr.name not in assignment:
            raise EvalError(None, f"'{expr.name}' has no value")
        return assignment[expr.name]
    if isinstance(expr, Const):
        return expr.value
    if isinstance(expr, Not):
        return not evaluate(expr.operand, assignment)
    if isinstance(expr, And):
        left, right = evaluate(expr.left, assignment), evaluate(expr.right, assignment)
        return left and right
    if isinstance(expr, Or):
        left, right = evaluate(expr.left, assignment), evaluate(expr.right, assignment)
        return left or right
    if isinstance(expr, Xor):
        left, right = evaluate(expr.left, assignment), evaluate(expr.right, assignment)
        return left != right
    raise TypeError(f"unknown expr {expr!r}")


def collect_variables(expr: Expr) -> List[str]:
    """
    Return the variable names of a tree in first-seen (left-to-right) order.

    Walks the finished tree independently of the parser, so it can check
    that Equation.variables still matches what evaluate() will look up.
    """
    seen: List[str] = []

    def walk(e: Expr) -> None:
        if isinstance(e, Var):
            if e.name not in seen:
                seen.append(e.name)
        elif isinstance(e, Not):
            walk(e.operand)
        elif isinstance(e, (And, Or, Xor)):
            walk(e.left)
            walk(e.right)

    walk(expr)
    return seen


__all__ = ["Assignment", "EvalError", "evaluate", "collect_variables"]
