import string
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from errors import LexError


class OperatorKind(Enum):
    NOT = "NOT"
    AND = "AND"
    OR = "OR"
    XOR = "XOR"


# Textual spellings are case-sensitive and only match a whole word.
KEYWORDS = {
    "NOT": OperatorKind.NOT,
    "AND": OperatorKind.AND,
    "OR": OperatorKind.OR,
    "XOR": OperatorKind.XOR,
}

# "∨" is OR only; it is never read as AND.
SYMBOLS = {
    "!": OperatorKind.NOT,
    "¬": OperatorKind.NOT,
    ".": OperatorKind.AND,
    "+": OperatorKind.OR,
    "∨": OperatorKind.OR,
    "^": OperatorKind.XOR,
    "⊕": OperatorKind.XOR,
    "⊻": OperatorKind.XOR,
}

CONSTANTS = {"true": True, "false": False, "1": True, "0": False}

STRUCTURAL = {"(": "LPAREN", ")": "RPAREN", "=": "EQUAL"}

# ASCII only, like [A-Za-z_][A-Za-z0-9_]*
IDENT_START = frozenset(string.ascii_letters + "_")
IDENT_CHARS = frozenset(string.ascii_letters + string.digits + "_")


@dataclass(frozen=True)
class Token:
    kind: str
    value: Union[str, OperatorKind, bool, None]
    pos: int


def _is_ident_start(ch: str) -> bool:
    return ch in IDENT_START


def _is_ident_char(ch: str) -> bool:
    return ch in IDENT_CHARS


def tokenize(line: str) -> List[Token]:
    """
    Split one equation line into tokens, ending with an EOF token at len(line).

    Kinds: IDENT, OP, CONST, LPAREN, RPAREN, EQUAL, EOF.
    Raises LexError with the offset of the first unrecognized character.
    """
    tokens: List[Token] = []
    i, n = 0, len(line)

    while i < n:
        ch = line[i]

        # Whitespace
        if ch.isspace():
            i += 1
            continue

        # Arrow form of '='
        if line.startswith("->", i):
            tokens.append(Token("EQUAL", None, i))
            i += 2
            continue

        if ch in STRUCTURAL:
            tokens.append(Token(STRUCTURAL[ch], None, i))
            i += 1
            continue

        if ch in SYMBOLS:
            tokens.append(Token("OP", SYMBOLS[ch], i))
            i += 1
            continue

        # Numeric constants: only a lone 0 or 1
        if ch in string.digits:
            start = i
            while i < n and _is_ident_char(line[i]):
                i += 1
            word = line[start:i]
            if word not in CONSTANTS:
                raise LexError(start, f"bad constant {word!r}")
            tokens.append(Token("CONST", CONSTANTS[word], start))
            continue

        # Word (identifier, keyword or named constant)
        if _is_ident_start(ch):
            start = i
            while i < n and _is_ident_char(line[i]):
                i += 1
            word = line[start:i]
            if word in KEYWORDS:
                tokens.append(Token("OP", KEYWORDS[word], start))
            elif word in CONSTANTS:
                tokens.append(Token("CONST", CONSTANTS[word], start))
            else:
                tokens.append(Token("IDENT", word, start))
            continue

        raise LexError(i, f"unexpected character {ch!r}")

    tokens.append(Token("EOF", None, n))
    return tokens


__all__ = ["OperatorKind", "Token", "LexError", "KEYWORDS", "SYMBOLS", "tokenize"]
