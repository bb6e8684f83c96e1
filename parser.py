from dataclasses import dataclass
from typing import List, Tuple, Union

from errors import ParseError, ResourceError
from lexer import OperatorKind, Token

@dataclass(frozen=True)
class Var: name: str
@dataclass(frozen=True)
class Const: value: bool

Expr = Union["Not","And","Or","Xor",Var,Const]

@dataclass(frozen=True)
class Not: operand: Expr
@dataclass(frozen=True)
class And: left: Expr; right: Expr
@dataclass(frozen=True)
class Or: left: Expr; right: Expr
@dataclass(frozen=True)
class Xor: left: Expr; right: Expr

@dataclass(frozen=True)
class Equation:
    output_name: str
    variables: Tuple[str, ...]
    expr: Expr

# Binding power of binary operators: OR < XOR < AND. NOT binds tighter than all.
BINARY_OPS = {
    OperatorKind.OR: (1, Or),
    OperatorKind.XOR: (2, Xor),
    OperatorKind.AND: (3, And),
}

class Parser:
    def __init__(self, tokens: List[Token]):
        self.toks = tokens; self.i = 0
        self.variables: List[str] = []

    def _peek(self)->Token:
        return self.toks[self.i] if self.i < len(self.toks) else self.toks[-1]
    def _advance(self)->Token:
        t = self._peek(); self.i += 1; return t
    def _match(self, kind:str)->Token:
        t = self._peek()
        if t.kind!=kind: self._error(f"expected {kind}, got {t.kind}")
        return self._advance()
    def _accept_op(self, op:OperatorKind)->bool:
        t = self._peek()
        if t.kind=="OP" and t.value is op: self._advance(); return True
        return False
    def _error(self, msg:str)->None:
        raise ParseError(self._peek().pos, msg)

    def parse_expression(self)->Expr:
        e = self.parse_binary()
        if self._peek().kind!="EOF": self._error("trailing tokens after expression")
        return e

    def _peek_binary(self):
        t = self._peek()
        return BINARY_OPS.get(t.value) if t.kind=="OP" else None

    def parse_binary(self, min_power:int=1)->Expr:
        # precedence climbing: one frame per nesting level, not per operator level
        left = self.parse_unary()
        while True:
            entry = self._peek_binary()
            if entry is None or entry[0]<min_power: return left
            self._advance()
            power, node = entry
            left = node(left, self.parse_binary(power+1))

    def parse_unary(self)->Expr:
        nots = 0
        while self._accept_op(OperatorKind.NOT): nots += 1
        e = self.parse_primary()
        for _ in range(nots): e = Not(e)
        return e

    def parse_primary(self)->Expr:
        t = self._peek()
        if t.kind=="IDENT":
            self._advance(); name = t.value; assert isinstance(name, str)
            if name not in self.variables: self.variables.append(name)
            return Var(name)
        if t.kind=="CONST":
            self._advance(); return Const(bool(t.value))
        if t.kind=="LPAREN":
            self._advance(); e = self.parse_binary()
            self._match("RPAREN")
            return e
        self._error("expected an identifier, a constant or '('")

def _split_equation(tokens: List[Token])->Tuple[List[Token], List[Token], Token]:
    """
    Split tokens around the single EQUAL token.

    Returns (left region ending in a synthetic EOF at the '=' offset,
    right region without its EOF, the EOF token of the line).
    """
    eof = tokens[-1] if tokens and tokens[-1].kind=="EOF" else Token("EOF", None, 0)
    eqs = [k for k, t in enumerate(tokens) if t.kind=="EQUAL"]
    if not eqs: raise ParseError(eof.pos, "missing '='")
    if len(eqs)>1: raise ParseError(tokens[eqs[1]].pos, "more than one '='")
    k = eqs[0]
    left = tokens[:k] + [Token("EOF", None, tokens[k].pos)]
    right = [t for t in tokens[k+1:] if t.kind!="EOF"]
    return left, right, eof

def parse(tokens: List[Token])->Equation:
    left, right, eof = _split_equation(tokens)
    if not right: raise ParseError(eof.pos, "missing output name")
    if right[0].kind!="IDENT": raise ParseError(right[0].pos, "output name must be an identifier")
    if len(right)>1: raise ParseError(right[1].pos, "extra tokens after output name")
    p = Parser(left)
    try:
        expr = p.parse_expression()
    except RecursionError:
        raise ResourceError(None, "expression nested too deeply") from None
    return Equation(str(right[0].value), tuple(p.variables), expr)

_OP_NAMES = {And: "AND", Or: "OR", Xor: "XOR"}

def expr_to_str(e: Expr)->str:
    if isinstance(e, Var): return e.name
    if isinstance(e, Const): return "true" if e.value else "false"
    if isinstance(e, Not): return f"NOT {expr_to_str(e.operand)}"
    if isinstance(e, (And, Or, Xor)):
        return f"({expr_to_str(e.left)} {_OP_NAMES[type(e)]} {expr_to_str(e.right)})"
    raise TypeError(f"unknown expr {e}")

def equation_to_str(eq: Equation)->str:
    return f"{expr_to_str(eq.expr)} = {eq.output_name}"

__all__ = ["Var","Const","Not","And","Or","Xor","Expr","Equation","Parser",
           "ParseError","parse","expr_to_str","equation_to_str"]
