"""Forward-mode differentiation: value and derivative in a single walk."""
from .differentiate import variable_id
from .evaluate import Environment
from .expr import Expr


def derive_forward(expr, env, wrt):
    wrt = variable_id(wrt)
    if not isinstance(expr, Expr):
        raise TypeError(f"Cannot differentiate a {type(expr).__name__}")
    if not isinstance(env, Environment):
        env = Environment(env or ())
    value, prime = expr.derive_forward(env, wrt)
    return (float(value), float(prime))
