#!/usr/bin/env python3
"""
booltable.py

Prints the truth table of boolean equations such as `a AND NOT b = out`.

Usage:
  booltable [--max-vars N] [--image PATH.ppm] [--show-ast] [FILE]

Without FILE, equations are read interactively, one per line, until EOF or
`quit`. With FILE, every non-blank line that is not a `#` comment is
evaluated in turn, and the exit status is 1 if any of them failed.

A malformed line never stops the program: it is reported on stderr as
`invalid expression at column N` and the next line is read.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

import config
from core import parse_line
from errors import CoreError
from io_utils import _eprintln, equation_lines, validate_image_path, validate_input_file
from parser import equation_to_str
from render import render_table
from truth_table import format_table, generate

QUIT_WORDS = {"quit", "exit"}


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="booltable", description="Print truth tables of boolean equations.")
    ap.add_argument("file", nargs="?", help="File of equations, one per line (default: interactive)")
    ap.add_argument("--max-vars", type=int, default=None,
                    help=f"Refuse equations with more variables than this; 0 for no limit "
                         f"(default: ${config.ENV_MAX_VARS} or {config.DEFAULT_MAX_VARIABLES})")
    ap.add_argument("--image", default=None, help="Also write the latest table to this .ppm file")
    ap.add_argument("--show-ast", action="store_true", help="Print the parenthesized expression before each table")
    return ap


def run_line(text: str, cfg: config.Config, out: TextIO) -> bool:
    """Evaluate one equation and print its table to `out`. Return False on a bad line."""
    try:
        equation = parse_line(text)
        table = generate(equation, cfg.max_variables)
    except CoreError as e:
        _eprintln(f"Error: {e}")
        return False

    if cfg.show_ast:
        print(equation_to_str(equation), file=out)
    print(format_table(table), file=out)

    if cfg.image_path:
        try:
            render_table(table, cfg.image_path)
        except OSError as e:
            _eprintln(f"Error rendering image: {e}")
            return False
    return True


def run_file(path: str, cfg: config.Config, out: TextIO) -> int:
    failures: List[int] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, text in equation_lines(f):
            if not run_line(text, cfg, out):
                _eprintln(f"  (line {lineno}: {text})")
                failures.append(lineno)
            print(file=out)
    if failures:
        _eprintln(f"{len(failures)} line(s) failed: {', '.join(map(str, failures))}")
        return 1
    return 0


def repl(cfg: config.Config, out: TextIO) -> int:
    while True:
        try:
            text = input(cfg.prompt)
        except EOFError:
            print(file=out)
            break
        except KeyboardInterrupt:
            print(file=out)
            break
        text = text.strip()
        if not text:
            continue
        if text in QUIT_WORDS:
            break
        run_line(text, cfg, out)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    try:
        cfg = config.apply_args(config.from_env(), args)
    except ValueError as e:
        _eprintln(f"Error: {e}")
        return 2

    if cfg.image_path and validate_image_path(cfg.image_path) != 0:
        return 2

    if args.file is None:
        return repl(cfg, sys.stdout)
    if validate_input_file(args.file) != 0:
        return 2
    return run_file(args.file, cfg, sys.stdout)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
