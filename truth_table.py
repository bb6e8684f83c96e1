# truth_table.py
"""
Truth table generation
----------------------
Enumerates every assignment of an Equation's variables and evaluates the
expression once per row.

Row order: the row index counts from 0 to 2^n - 1 and its bits, most
significant first, give the values of `variables` in declaration order
(1 = true). With no variables there is exactly one row.

Cost grows as 2^n, so generate() refuses equations with more variables than
`max_variables` (ResourceError). Pass None to lift the ceiling.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from errors import ResourceError
from evaluator import Assignment, evaluate
from parser import Equation

DEFAULT_MAX_VARIABLES = 20

Row = Tuple[Tuple[bool, ...], bool]


@dataclass
class TruthTable:
    variables: Tuple[str, ...]
    output_name: str
    rows: List[Row] = field(default_factory=list)

    @property
    def header(self) -> Tuple[str, ...]:
        return self.variables + (self.output_name,)

    def outputs(self) -> List[bool]:
        return [out for _, out in self.rows]

    def column(self, name: str) -> List[bool]:
        """Values of one input column, looked up by variable name."""
        k = self.variables.index(name)
        return [inputs[k] for inputs, _ in self.rows]


def index_to_bools(index: int, width: int) -> Tuple[bool, ...]:
    """Bits of `index`, most significant first, as `width` booleans."""
    return tuple((index >> (width - 1 - k)) & 1 == 1 for k in range(width))


def generate(equation: Equation,
             max_variables: Optional[int] = DEFAULT_MAX_VARIABLES) -> TruthTable:
    n = len(equation.variables)
    if max_variables is not None and n > max_variables:
        raise ResourceError(None, f"{n} variables exceed the limit of {max_variables}")

    rows: List[Row] = []
    try:
        for index in range(1 << n):
            values = index_to_bools(index, n)
            assignment: Assignment = dict(zip(equation.variables, values))
            rows.append((values, evaluate(equation.expr, assignment)))
    except RecursionError:
        raise ResourceError(None, "expression nested too deeply") from None

    return TruthTable(equation.variables, equation.output_name, rows)


def format_table(table: TruthTable) -> str:
    """
    Render a table as pipe-separated text, 1/0 for true/false:

        | a | b | out |
        |---|---|-----|
        | 0 | 0 | 0   |

    With no variables only the output column is printed (`| k |`); no
    empty input cell is drawn in front of it.
    """
    widths = [len(name) for name in table.header]
    lines = [
        "| " + " | ".join(table.header) + " |",
        "|" + "|".join("-" * (w + 2) for w in widths) + "|",
    ]
    for inputs, out in table.rows:
        cells = [("1" if v else "0").ljust(w) for v, w in zip(inputs + (out,), widths)]
        lines.append("| " + " | ".join(cells) + " |")
    return "\n".join(lines)


__all__ = ["DEFAULT_MAX_VARIABLES", "TruthTable", "generate", "format_table", "index_to_bools"]
