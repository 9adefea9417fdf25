import logging

from .expr import Expr, Variable
from .ids import VariableId
from .rules import FULL_RULES

logger = logging.getLogger(__name__)


def variable_id(wrt):
    if isinstance(wrt, Variable):
        return wrt.id
    if isinstance(wrt, VariableId):
        return wrt
    raise TypeError(
        f"can only differentiate by a variable, got {type(wrt).__name__}")


def differentiate(expr, wrt, rules=FULL_RULES):
    """Return d(expr)/d(wrt) as a new, simplified tree.

    ``wrt`` is a Variable node or its VariableId. A variable that does not
    occur in ``expr`` gives Constant(0).
    """
    wrt = variable_id(wrt)
    if not isinstance(expr, Expr):
        raise TypeError(f"Cannot differentiate a {type(expr).__name__}")
    logger.debug("differentiating %r by %r", expr, wrt)
    return expr.derive_symbolic(wrt, rules)
