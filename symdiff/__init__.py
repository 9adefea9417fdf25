from .differentiate import differentiate
from .evaluate import Environment, evaluate
from .expr import (
    BinaryExpr,
    Constant,
    Difference,
    Expr,
    Product,
    Quotient,
    Sum,
    Variable,
    as_expr,
    constant,
    new_variable,
)
from .forward import derive_forward
from .ids import VariableId
from .rules import FOLD_ONLY_RULES, FULL_RULES, RuleSet, add, div, mul, sub

__version__ = "0.1.0"
