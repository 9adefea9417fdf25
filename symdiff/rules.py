"""Smart constructors for the four binary operators.

Each constructor tries its rewrite rules in order and only builds a new
node when none of them applies.
"""
import logging
from dataclasses import dataclass

from .expr import (Constant, Difference, Product, Quotient, Sum, as_expr,
                   fdiv)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleSet:
    # x*0, 0*x, x*1, 1*x, x+0, 0+x, x-0, 0/x, x/1
    eliminate_identities: bool = True
    fold_constants: bool = True
    # x/0 -> 0 for a literal zero divisor
    # TODO: make False the default once callers stop relying on x/0 == 0
    zero_divisor_is_zero: bool = True


FULL_RULES = RuleSet()
FOLD_ONLY_RULES = RuleSet(eliminate_identities=False, zero_divisor_is_zero=False)


def _is_zero(expr):
    return isinstance(expr, Constant) and expr.value == 0.0


def _is_one(expr):
    return isinstance(expr, Constant) and expr.value == 1.0


def _both_constant(lhs, rhs):
    return isinstance(lhs, Constant) and isinstance(rhs, Constant)


def _rewrite(rule, lhs, rhs, result):
    logger.debug("%s: (%r, %r) -> %r", rule, lhs, rhs, result)
    return result


def add(lhs, rhs, rules=FULL_RULES):
    lhs, rhs = as_expr(lhs), as_expr(rhs)

    if rules.fold_constants and _both_constant(lhs, rhs):
        return _rewrite("fold +", lhs, rhs, Constant(lhs.value + rhs.value))
    if rules.eliminate_identities:
        if _is_zero(lhs):
            return _rewrite("0 + x", lhs, rhs, rhs)
        if _is_zero(rhs):
            return _rewrite("x + 0", lhs, rhs, lhs)
    return Sum(lhs, rhs)


def sub(lhs, rhs, rules=FULL_RULES):
    lhs, rhs = as_expr(lhs), as_expr(rhs)

    if rules.fold_constants and _both_constant(lhs, rhs):
        return _rewrite("fold -", lhs, rhs, Constant(lhs.value - rhs.value))
    if rules.eliminate_identities and _is_zero(rhs):
        return _rewrite("x - 0", lhs, rhs, lhs)
    return Difference(lhs, rhs)


def mul(lhs, rhs, rules=FULL_RULES):
    lhs, rhs = as_expr(lhs), as_expr(rhs)

    if rules.eliminate_identities:
        if _is_zero(lhs) or _is_zero(rhs):
            return _rewrite("x * 0", lhs, rhs, Constant(0.0))
        if _is_one(lhs):
            return _rewrite("1 * x", lhs, rhs, rhs)
        if _is_one(rhs):
            return _rewrite("x * 1", lhs, rhs, lhs)
    if rules.fold_constants and _both_constant(lhs, rhs):
        return _rewrite("fold *", lhs, rhs, Constant(lhs.value * rhs.value))
    return Product(lhs, rhs)


def div(lhs, rhs, rules=FULL_RULES):
    lhs, rhs = as_expr(lhs), as_expr(rhs)

    if rules.zero_divisor_is_zero and _is_zero(rhs):
        return _rewrite("x / 0", lhs, rhs, Constant(0.0))
    if rules.eliminate_identities:
        if _is_zero(lhs):
            return _rewrite("0 / x", lhs, rhs, Constant(0.0))
        if _is_one(rhs):
            return _rewrite("x / 1", lhs, rhs, lhs)
    if rules.fold_constants and _both_constant(lhs, rhs):
        return _rewrite("fold /", lhs, rhs, Constant(fdiv(lhs.value, rhs.value)))
    return Quotient(lhs, rhs)
