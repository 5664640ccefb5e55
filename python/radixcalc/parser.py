# RadixCalc SDK - Expression Parser
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""
Parser for infix arithmetic expressions.

Grammar (lowest to highest precedence):

    expression     := additive
    additive       := multiplicative (('+' | '-') multiplicative)*
    multiplicative := unary (('*' | '/' | '%') unary)*
    unary          := ('-' | '+') unary | power
    power          := atom ('^' unary)?
    atom           := NUMBER | NAME | NAME '(' arguments ')' | '(' additive ')'

``^`` (or ``**``) is right-associative and binds tighter than unary minus,
so ``-2^2`` is -4 and ``2^3^2`` is 512.

Example:
    >>> evaluate_expression('(24 / 2) + 5 * 7')
    47.0
    >>> evaluate_expression('4 ^ 0.5')
    2.0
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional
import math
import re

from .exceptions import ExpressionError, PrecisionOverflow, UnknownFunctionError
from .expr import (
    Add, Call, Const, Div, EvalEnv, Expr, Mod, Mul, Neg, Pow, Sub, Variable, FUNCTIONS,
)


_TOKEN_RE = re.compile(
    r"""
    (?P<number>(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)
    | (?P<name>[A-Za-z_][A-Za-z_0-9]*)
    | (?P<op>\*\*|[-+*/%^(),])
    | (?P<space>\s+)
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class Token:
    kind: str  # 'number', 'name', 'op' or 'end'
    text: str
    position: int


def tokenize(text: str) -> list[Token]:
    """
    Split an expression into tokens, ending with an 'end' token.

    Raises:
        ExpressionError: On a character that starts no token.
    """
    tokens = []
    position = 0
    while position < len(text):
        match = _TOKEN_RE.match(text, position)
        if match is None:
            raise ExpressionError(f"Unexpected character {text[position]!r}", position=position)
        kind = match.lastgroup
        if kind != 'space':
            token_text = match.group()
            if token_text == '**':
                token_text = '^'
            tokens.append(Token(kind, token_text, position))
        position = match.end()
    tokens.append(Token('end', '', len(text)))
    return tokens


class Parser:
    """Recursive-descent parser producing an Expr."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = tokenize(text)
        self.index = 0

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def _accept(self, *ops: str) -> Optional[Token]:
        if self.current.kind == 'op' and self.current.text in ops:
            return self._advance()
        return None

    def _expect(self, op: str) -> Token:
        token = self._accept(op)
        if token is None:
            raise self._unexpected(f"expected '{op}'")
        return token

    def _unexpected(self, detail: str) -> ExpressionError:
        token = self.current
        found = "end of input" if token.kind == 'end' else repr(token.text)
        return ExpressionError(f"Unexpected {found}, {detail}", position=token.position)

    def parse(self) -> Expr:
        if self.current.kind == 'end':
            raise ExpressionError("Empty expression")
        expr = self._additive()
        if self.current.kind != 'end':
            raise self._unexpected("expected an operator")
        return expr

    def _additive(self) -> Expr:
        expr = self._multiplicative()
        while True:
            if self._accept('+'):
                expr = Add(expr, self._multiplicative())
            elif self._accept('-'):
                expr = Sub(expr, self._multiplicative())
            else:
                return expr

    def _multiplicative(self) -> Expr:
        expr = self._unary()
        while True:
            if self._accept('*'):
                expr = Mul(expr, self._unary())
            elif self._accept('/'):
                expr = Div(expr, self._unary())
            elif self._accept('%'):
                expr = Mod(expr, self._unary())
            else:
                return expr

    def _unary(self) -> Expr:
        if self._accept('-'):
            return Neg(self._unary())
        if self._accept('+'):
            return self._unary()
        return self._power()

    def _power(self) -> Expr:
        base = self._atom()
        if self._accept('^'):
            return Pow(base, self._unary())
        return base

    def _atom(self) -> Expr:
        token = self.current
        if token.kind == 'number':
            self._advance()
            # Fraction parses decimal literals exactly ('0.1' is 1/10)
            return Const(Fraction(token.text))
        if token.kind == 'name':
            self._advance()
            if self._accept('('):
                return self._call(token)
            return Variable(token.text)
        if self._accept('('):
            expr = self._additive()
            self._expect(')')
            return expr
        raise self._unexpected("expected a number, name or '('")

    def _call(self, name: Token) -> Expr:
        args = []
        if not self._accept(')'):
            args.append(self._additive())
            while self._accept(','):
                args.append(self._additive())
            self._expect(')')
        if name.text not in FUNCTIONS:
            raise UnknownFunctionError(name.text, position=name.position)
        return Call(name.text, tuple(args))


def parse_expression(text: str) -> Expr:
    """
    Parse an infix arithmetic expression.

    Raises:
        ExpressionError: If the text is not a valid expression.
    """
    return Parser(text).parse()


def evaluate_expression(text: str, variables: Optional[EvalEnv] = None) -> float:
    """
    Parse and evaluate an expression to a float.

    Args:
        text: Expression such as ``'1 / 7'`` or ``'sqrt(2) * pi'``.
        variables: Optional values for names used in the expression.

    Raises:
        ExpressionError: If the expression is invalid or a function is
                         evaluated outside its domain.
        DivisionByZero: On division or modulo by zero.
        PrecisionOverflow: If the result exceeds the float range.
    """
    try:
        result = parse_expression(text).evaluate(variables or {})
        value = float(result)
    except PrecisionOverflow:
        raise
    except OverflowError:
        # Also raised when an exact operand beyond float range meets a float
        raise PrecisionOverflow(f"Result of {text!r} exceeds the float range") from None
    if not math.isfinite(value):
        raise PrecisionOverflow(f"Result of {text!r} is not finite")
    return value
