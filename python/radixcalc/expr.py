# RadixCalc SDK - Arithmetic Expressions
# Copyright (c) 2024 RadixCalc Contributors. All rights reserved.

"""
Arithmetic expression AST for RadixCalc.

Expressions are immutable and support natural Python math syntax. Literals
are kept as exact Fractions, so polynomial arithmetic stays exact until a
transcendental function or a fractional power forces a float.

Example:
    >>> x = var('x')
    >>> expr = (x + 1) ** 2 / 4
    >>> expr.free_vars()
    frozenset({'x'})
    >>> expr.evaluate({'x': 3})
    Fraction(4, 1)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from fractions import Fraction
from typing import Callable, FrozenSet, Mapping, Union
import math

from .exceptions import DivisionByZero, ExpressionError, PrecisionOverflow, UnknownFunctionError
from .rational import round_half_away, to_fraction as _to_nice_fraction


EvalResult = Union[Fraction, float]

# Type for evaluation environment
EvalEnv = Mapping[str, Union[int, float, Fraction]]

# Type alias for things that can be converted to expressions
ExprLike = Union['Expr', int, float, Fraction]

CONSTANTS: dict[str, float] = {
    'pi': math.pi,
    'e': math.e,
}

# Integer powers beyond this are computed in floating point
EXACT_POWER_LIMIT = 4096


class Expr(ABC):
    """
    Base class for arithmetic expressions.

    Expressions are immutable and can be composed using Python operators.
    """

    @abstractmethod
    def free_vars(self) -> FrozenSet[str]:
        """Return all variable names used in this expression."""
        ...

    @abstractmethod
    def evaluate(self, env: EvalEnv) -> EvalResult:
        """
        Evaluate the expression.

        Args:
            env: Dictionary mapping variable names to values.

        Returns:
            A Fraction while the computation is exact, a float otherwise.

        Raises:
            ExpressionError: If a variable is unbound or a function is
                             evaluated outside its domain.
            DivisionByZero: On division or modulo by zero.
        """
        ...

    # Operator overloading for natural math syntax
    def __neg__(self) -> Expr:
        return Neg(self)

    def __add__(self, other: ExprLike) -> Expr:
        return Add(self, _to_expr(other))

    def __radd__(self, other: ExprLike) -> Expr:
        return Add(_to_expr(other), self)

    def __sub__(self, other: ExprLike) -> Expr:
        return Sub(self, _to_expr(other))

    def __rsub__(self, other: ExprLike) -> Expr:
        return Sub(_to_expr(other), self)

    def __mul__(self, other: ExprLike) -> Expr:
        return Mul(self, _to_expr(other))

    def __rmul__(self, other: ExprLike) -> Expr:
        return Mul(_to_expr(other), self)

    def __truediv__(self, other: ExprLike) -> Expr:
        return Div(self, _to_expr(other))

    def __rtruediv__(self, other: ExprLike) -> Expr:
        return Div(_to_expr(other), self)

    def __mod__(self, other: ExprLike) -> Expr:
        return Mod(self, _to_expr(other))

    def __pow__(self, other: ExprLike) -> Expr:
        return Pow(self, _to_expr(other))

    def __rpow__(self, other: ExprLike) -> Expr:
        return Pow(_to_expr(other), self)


def _to_expr(x: ExprLike) -> Expr:
    """Convert a value to an Expr."""
    if isinstance(x, Expr):
        return x
    elif isinstance(x, (int, float, Fraction)):
        return Const(x)
    else:
        raise TypeError(f"Cannot convert {type(x).__name__} to Expr")


@dataclass(frozen=True)
class Variable(Expr):
    """A named value, looked up in the environment and then in CONSTANTS."""
    name: str

    def free_vars(self) -> FrozenSet[str]:
        if self.name in CONSTANTS:
            return frozenset()
        return frozenset({self.name})

    def evaluate(self, env: EvalEnv) -> EvalResult:
        if self.name in env:
            value = env[self.name]
            return value if isinstance(value, float) else Fraction(value)
        if self.name in CONSTANTS:
            return CONSTANTS[self.name]
        raise UnknownFunctionError(self.name)

    def __repr__(self) -> str:
        return f"var('{self.name}')"


@dataclass(frozen=True)
class Const(Expr):
    """A constant value (rational number)."""
    _value: Union[int, float, Fraction]

    @property
    def value(self) -> Fraction:
        """Get the value as an exact Fraction."""
        return _to_nice_fraction(self._value)

    def free_vars(self) -> FrozenSet[str]:
        return frozenset()

    def evaluate(self, env: EvalEnv) -> Fraction:
        return self.value

    def __repr__(self) -> str:
        v = self.value
        if v.denominator == 1:
            return f"const({v.numerator})"
        return f"const({v})"


# Binary operations

@dataclass(frozen=True)
class Add(Expr):
    """Addition: e1 + e2."""
    e1: Expr
    e2: Expr

    def free_vars(self) -> FrozenSet[str]:
        return self.e1.free_vars() | self.e2.free_vars()

    def evaluate(self, env: EvalEnv) -> EvalResult:
        return self.e1.evaluate(env) + self.e2.evaluate(env)

    def __repr__(self) -> str:
        return f"({self.e1} + {self.e2})"


@dataclass(frozen=True)
class Sub(Expr):
    """Subtraction: e1 - e2."""
    e1: Expr
    e2: Expr

    def free_vars(self) -> FrozenSet[str]:
        return self.e1.free_vars() | self.e2.free_vars()

    def evaluate(self, env: EvalEnv) -> EvalResult:
        return self.e1.evaluate(env) - self.e2.evaluate(env)

    def __repr__(self) -> str:
        return f"({self.e1} - {self.e2})"


@dataclass(frozen=True)
class Mul(Expr):
    """Multiplication: e1 * e2."""
    e1: Expr
    e2: Expr

    def free_vars(self) -> FrozenSet[str]:
        return self.e1.free_vars() | self.e2.free_vars()

    def evaluate(self, env: EvalEnv) -> EvalResult:
        return self.e1.evaluate(env) * self.e2.evaluate(env)

    def __repr__(self) -> str:
        return f"({self.e1} * {self.e2})"


@dataclass(frozen=True)
class Div(Expr):
    """Division: e1 / e2."""
    e1: Expr
    e2: Expr

    def free_vars(self) -> FrozenSet[str]:
        return self.e1.free_vars() | self.e2.free_vars()

    def evaluate(self, env: EvalEnv) -> EvalResult:
        v1 = self.e1.evaluate(env)
        v2 = self.e2.evaluate(env)
        if v2 == 0:
            raise DivisionByZero(f"Division by zero in {self}")
        return v1 / v2

    def __repr__(self) -> str:
        return f"({self.e1} / {self.e2})"


@dataclass(frozen=True)
class Mod(Expr):
    """Remainder: e1 % e2, with the sign of e1."""
    e1: Expr
    e2: Expr

    def free_vars(self) -> FrozenSet[str]:
        return self.e1.free_vars() | self.e2.free_vars()

    def evaluate(self, env: EvalEnv) -> EvalResult:
        v1 = self.e1.evaluate(env)
        v2 = self.e2.evaluate(env)
        if v2 == 0:
            raise DivisionByZero(f"Modulo by zero in {self}")
        if isinstance(v1, float) or isinstance(v2, float):
            return math.fmod(v1, v2)
        # Truncated remainder, matching fmod for exact operands
        return v1 - v2 * math.trunc(v1 / v2)

    def __repr__(self) -> str:
        return f"({self.e1} % {self.e2})"


@dataclass(frozen=True)
class Pow(Expr):
    """Power: base ^ exponent."""
    base: Expr
    exponent: Expr

    def free_vars(self) -> FrozenSet[str]:
        return self.base.free_vars() | self.exponent.free_vars()

    def evaluate(self, env: EvalEnv) -> EvalResult:
        b = self.base.evaluate(env)
        n = self.exponent.evaluate(env)
        if b == 0 and n < 0:
            raise DivisionByZero(f"Zero raised to a negative power in {self}")
        exact = (
            isinstance(b, Fraction) and isinstance(n, Fraction)
            and n.denominator == 1 and abs(n) <= EXACT_POWER_LIMIT
        )
        if exact:
            return b ** n.numerator
        try:
            return math.pow(b, n)
        except ValueError:
            raise ExpressionError(f"{b} ^ {n} is not a real number") from None
        except OverflowError:
            raise PrecisionOverflow(f"{self} exceeds the float range") from None

    def __repr__(self) -> str:
        return f"({self.base} ^ {self.exponent})"


@dataclass(frozen=True)
class Neg(Expr):
    """Negation: -e."""
    e: Expr

    def free_vars(self) -> FrozenSet[str]:
        return self.e.free_vars()

    def evaluate(self, env: EvalEnv) -> EvalResult:
        return -self.e.evaluate(env)

    def __repr__(self) -> str:
        return f"(-{self.e})"


def _signum(x: EvalResult) -> int:
    return (x > 0) - (x < 0)


# name -> (min arity, max arity or None for variadic, implementation)
FUNCTIONS: dict[str, tuple[int, Union[int, None], Callable[..., EvalResult]]] = {
    'sqrt': (1, 1, math.sqrt),
    'exp': (1, 1, math.exp),
    'ln': (1, 1, math.log),
    'log': (1, 1, math.log),
    'abs': (1, 1, abs),
    'sin': (1, 1, math.sin),
    'cos': (1, 1, math.cos),
    'tan': (1, 1, math.tan),
    'asin': (1, 1, math.asin),
    'acos': (1, 1, math.acos),
    'atan': (1, 1, math.atan),
    'sinh': (1, 1, math.sinh),
    'cosh': (1, 1, math.cosh),
    'tanh': (1, 1, math.tanh),
    'asinh': (1, 1, math.asinh),
    'acosh': (1, 1, math.acosh),
    'atanh': (1, 1, math.atanh),
    'floor': (1, 1, math.floor),
    'ceil': (1, 1, math.ceil),
    'round': (1, 1, round_half_away),
    'signum': (1, 1, _signum),
    'atan2': (2, 2, math.atan2),
    'min': (1, None, min),
    'max': (1, None, max),
}


@dataclass(frozen=True)
class Call(Expr):
    """Function application: name(args...)."""
    name: str
    args: tuple[Expr, ...]

    def __post_init__(self):
        if self.name not in FUNCTIONS:
            raise UnknownFunctionError(self.name)
        lo, hi, _ = FUNCTIONS[self.name]
        if len(self.args) < lo or (hi is not None and len(self.args) > hi):
            expected = str(lo) if lo == hi else f"at least {lo}"
            raise ExpressionError(
                f"{self.name}() takes {expected} argument(s), got {len(self.args)}"
            )

    def free_vars(self) -> FrozenSet[str]:
        result: FrozenSet[str] = frozenset()
        for arg in self.args:
            result = result | arg.free_vars()
        return result

    def evaluate(self, env: EvalEnv) -> EvalResult:
        _, _, func = FUNCTIONS[self.name]
        values = [arg.evaluate(env) for arg in self.args]
        try:
            result = func(*values)
        except ValueError:
            raise ExpressionError(f"{self.name}() is undefined at {values}") from None
        except OverflowError:
            raise PrecisionOverflow(f"{self} exceeds the float range") from None
        if isinstance(result, int):
            return Fraction(result)
        return result

    def __repr__(self) -> str:
        return f"{self.name}({', '.join(repr(a) for a in self.args)})"


# Public constructors

def var(name: str) -> Variable:
    """Create a named variable."""
    if not isinstance(name, str):
        raise TypeError(f"Variable name must be a string, got {type(name).__name__}")
    if not name:
        raise ValueError("Variable name cannot be empty")
    return Variable(name)


def const(value: Union[int, float, Fraction]) -> Const:
    """Create a constant expression."""
    return Const(value)


def call(name: str, *args: ExprLike) -> Call:
    """Apply a named function, e.g. ``call('sqrt', x)``."""
    return Call(name, tuple(_to_expr(a) for a in args))
