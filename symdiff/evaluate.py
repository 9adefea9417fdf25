from collections.abc import Mapping

from .expr import Expr, Variable
from .ids import VariableId


def _key(key):
    if isinstance(key, Variable):
        return key.id
    if isinstance(key, VariableId):
        return key
    raise TypeError(
        f"environment keys must be variables, got {type(key).__name__}")


class Environment(Mapping):
    """Values for variables, looked up by identity.

    Unbound variables read as 0.0. Keys may be given as Variable nodes or as
    their VariableIds.
    """

    def __init__(self, bindings=()):
        if isinstance(bindings, Mapping):
            bindings = bindings.items()
        self._values = {_key(k): float(v) for k, v in bindings}

    def bind(self, key, value):
        env = Environment(self._values)
        env._values[_key(key)] = float(value)
        return env

    def get(self, key, default=0.0):
        return self._values.get(_key(key), default)

    def __getitem__(self, key):
        return self._values[_key(key)]

    def __contains__(self, key):
        try:
            return _key(key) in self._values
        except TypeError:
            return False

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"Environment({self._values!r})"


def evaluate(expr, env=None):
    if not isinstance(expr, Expr):
        raise TypeError(f"Cannot evaluate a {type(expr).__name__}")
    if not isinstance(env, Environment):
        env = Environment(env or ())
    return float(expr.eval(env))
