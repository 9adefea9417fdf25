"""Builds one sample expression and prints two partial derivatives.

    python -m symdiff.demo --x 10 --y 200
"""
import argparse
import copy
import logging

from .differentiate import differentiate
from .expr import new_variable
from .rules import FOLD_ONLY_RULES, FULL_RULES


def build_parser():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--x", type=float, default=10.0)
    parser.add_argument("--y", type=float, default=200.0)
    parser.add_argument("--fold-only", action="store_true",
                        help="only fold constants while differentiating")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    rules = FOLD_ONLY_RULES if args.fold_only else FULL_RULES

    x = new_variable("x")
    y = new_variable("y")  # different from x
    z = copy.copy(x)  # same as x

    expression = x * z + 4 * y * y / (x + 5)

    dexpr_dx = differentiate(expression, x, rules)
    dexpr_dy = differentiate(expression, y, rules)

    point = (x.bind(args.x), y.bind(args.y))
    print(f"f = {expression!r}")
    print(f"dExpr_dx(x={args.x:g}, y={args.y:g}): {dexpr_dx(*point)}")
    print(f"dExpr_dy(x={args.x:g}, y={args.y:g}): {dexpr_dy(*point)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
