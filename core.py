# core.py
from __future__ import annotations
from typing import Optional

from lexer import tokenize
from parser import Equation, parse
from truth_table import DEFAULT_MAX_VARIABLES, TruthTable, generate


def parse_line(line: str) -> Equation:
    """Tokenize and parse one `<expression> = <name>` line."""
    return parse(tokenize(line))


def evaluate_line(line: str,
                  max_variables: Optional[int] = DEFAULT_MAX_VARIABLES) -> TruthTable:
    """
    Turn one equation line into its truth table.

    Raises a CoreError subclass (LexError, ParseError, EvalError,
    ResourceError) and never returns a partial table.
    """
    return generate(parse_line(line), max_variables)


__all__ = ["parse_line", "evaluate_line"]
