"""Expression trees: two leaf kinds and four binary operators.

Trees are immutable. Every operator goes through the smart constructors in
:mod:`symdiff.rules`, so a tree handed back to the caller is always in
simplified form.
"""
import numbers
from dataclasses import dataclass

import numpy as np

from .ids import VariableId, idm


def fdiv(lhs, rhs):
    """Float division that gives inf/nan instead of raising or warning."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(lhs) / np.float64(rhs))


def _is_operand(value):
    if isinstance(value, Expr):
        return True
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _binary(name, reflected=False):
    def method(self, other):
        if not _is_operand(other):
            return NotImplemented
        # rules imports this module
        from . import rules
        combine = getattr(rules, name)
        if reflected:
            return combine(other, self)
        return combine(self, other)

    method.__name__ = f"__{'r' if reflected else ''}{name}__"
    return method


class Expr(object):
    children = ()

    __add__ = _binary("add")
    __radd__ = _binary("add", reflected=True)
    __sub__ = _binary("sub")
    __rsub__ = _binary("sub", reflected=True)
    __mul__ = _binary("mul")
    __rmul__ = _binary("mul", reflected=True)
    __truediv__ = _binary("div")
    __rtruediv__ = _binary("div", reflected=True)

    def eval(self, env):
        raise NotImplementedError

    def derive_symbolic(self, wrt, rules):
        raise NotImplementedError

    def derive_forward(self, env, wrt):
        raise NotImplementedError

    def __neg__(self):
        from .rules import sub
        return sub(Constant(0.0), self)

    def __pos__(self):
        return self

    def __call__(self, *bindings):
        """Evaluate with ``(variable, value)`` pairs, e.g. ``f(x.bind(10))``."""
        from .evaluate import Environment, evaluate
        return evaluate(self, Environment(bindings))

    def variables(self):
        found = set()
        stack = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Variable):
                found.add(node.id)
            stack.extend(node.children)
        return frozenset(found)


@dataclass(frozen=True, repr=False)
class Constant(Expr):
    value: float

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def __repr__(self):
        return f"{self.value}"

    def eval(self, env):
        return self.value

    def derive_symbolic(self, wrt, rules):
        return Constant(0.0)

    def derive_forward(self, env, wrt):
        return (self.value, 0.0)


@dataclass(frozen=True, repr=False)
class Variable(Expr):
    id: VariableId

    def __repr__(self):
        return repr(self.id)

    @property
    def name(self):
        return self.id.name

    def bind(self, value):
        return (self.id, float(value))

    def eval(self, env):
        return env.get(self.id)

    def derive_symbolic(self, wrt, rules):
        return Constant(1.0 if self.id == wrt else 0.0)

    def derive_forward(self, env, wrt):
        return (env.get(self.id), 1.0 if self.id == wrt else 0.0)


@dataclass(frozen=True, repr=False)
class BinaryExpr(Expr):
    lhs: Expr
    rhs: Expr

    symbol = None

    @property
    def children(self):
        return (self.lhs, self.rhs)

    def __repr__(self):
        return f"({self.lhs!r} {self.symbol} {self.rhs!r})"


class Sum(BinaryExpr):
    symbol = "+"

    def eval(self, env):
        return self.lhs.eval(env) + self.rhs.eval(env)

    def derive_symbolic(self, wrt, rules):
        from .rules import add
        return add(self.lhs.derive_symbolic(wrt, rules),
                   self.rhs.derive_symbolic(wrt, rules), rules)

    def derive_forward(self, env, wrt):
        lhs, lhs_prime = self.lhs.derive_forward(env, wrt)
        rhs, rhs_prime = self.rhs.derive_forward(env, wrt)
        return (lhs + rhs, lhs_prime + rhs_prime)


class Difference(BinaryExpr):
    symbol = "-"

    def eval(self, env):
        return self.lhs.eval(env) - self.rhs.eval(env)

    def derive_symbolic(self, wrt, rules):
        from .rules import sub
        return sub(self.lhs.derive_symbolic(wrt, rules),
                   self.rhs.derive_symbolic(wrt, rules), rules)

    def derive_forward(self, env, wrt):
        lhs, lhs_prime = self.lhs.derive_forward(env, wrt)
        rhs, rhs_prime = self.rhs.derive_forward(env, wrt)
        return (lhs - rhs, lhs_prime - rhs_prime)


class Product(BinaryExpr):
    symbol = "*"

    def eval(self, env):
        return self.lhs.eval(env) * self.rhs.eval(env)

    def derive_symbolic(self, wrt, rules):
        # (f * g)' = f' * g + f * g'
        from .rules import add, mul
        f, g = self.lhs, self.rhs
        return add(
            mul(f.derive_symbolic(wrt, rules), g, rules),
            mul(f, g.derive_symbolic(wrt, rules), rules),
            rules,
        )

    def derive_forward(self, env, wrt):
        lhs, lhs_prime = self.lhs.derive_forward(env, wrt)
        rhs, rhs_prime = self.rhs.derive_forward(env, wrt)
        return (lhs * rhs, lhs_prime * rhs + lhs * rhs_prime)


class Quotient(BinaryExpr):
    symbol = "/"

    def eval(self, env):
        return fdiv(self.lhs.eval(env), self.rhs.eval(env))

    def derive_symbolic(self, wrt, rules):
        # (f / g)' = (f' * g - f * g') / (g * g)
        from .rules import div, mul, sub
        f, g = self.lhs, self.rhs
        return div(
            sub(
                mul(f.derive_symbolic(wrt, rules), g, rules),
                mul(f, g.derive_symbolic(wrt, rules), rules),
                rules,
            ),
            mul(g, g, rules),
            rules,
        )

    def derive_forward(self, env, wrt):
        lhs, lhs_prime = self.lhs.derive_forward(env, wrt)
        rhs, rhs_prime = self.rhs.derive_forward(env, wrt)
        return (fdiv(lhs, rhs), fdiv(lhs_prime * rhs - lhs * rhs_prime, rhs * rhs))


def as_expr(value):
    """Return ``value`` as an expression, wrapping a real number in a Constant."""
    if isinstance(value, Expr):
        return value
    if _is_operand(value):
        return Constant(value)
    raise TypeError(
        f"expected an Expr or a real number, got {type(value).__name__}")


def constant(value):
    if not _is_operand(value) or isinstance(value, Expr):
        raise TypeError(
            f"constant() needs a real number, got {type(value).__name__}")
    return Constant(value)


def new_variable(name=None):
    """Create a variable with a freshly minted identity.

    The identity, not the name, decides which variable a tree refers to:
    two calls with the same name give two different variables, while copies
    of the returned node all denote the same one.
    """
    return Variable(idm.new_id(name))
