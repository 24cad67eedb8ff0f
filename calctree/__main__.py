"""
Print ``expression = value`` for each expression given on the command line,
or for a set of sample expressions when none are given.
"""
import argparse
import logging
import sys

from . import settings
from .exceptions import ExpressionError
from .utils import evaluate

SAMPLES = [
    "3.5 + 4.5",
    "5.4 - 3.2",
    "4.2 * 1.2",
    "6.7 / 3.1",
    "(3.5 + 3.2) * 2",
    "4.2 / (1.2 * 2.3)",
    "2^3",
    "-5 + 2",
    "sin(0)",
    "cos(0)",
    "tan(0)",
    "cot(1.5708)",
    "ln(2.71)",
    "log(100)",
    "sqrt(144)",
    "2^3.5",
    "2^-0.5",
    "sinh(1)",
    "cosh(1)",
    "tanh(1)",
    "coth(1)",
    "sech(1)",
    "csch(1)",
    "5!",
]


def main(argv=None):
    ap = argparse.ArgumentParser(prog="calctree", description="Evaluate arithmetic expressions")
    ap.add_argument("expressions", nargs="*", help="Expressions to evaluate (default: built-in samples)")
    ap.add_argument(
        "--precedence",
        choices=settings.PRECEDENCE_CHOICES,
        default=settings.PRECEDENCE,
        help="Operator precedence rules (default: %(default)s)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log parser steps")
    args = ap.parse_args(argv)

    # argparse does not check defaults against choices
    if args.precedence not in settings.PRECEDENCE_CHOICES:
        ap.error(
            f"invalid precedence {args.precedence!r} from CALCTREE_PRECEDENCE "
            f"(choose from {', '.join(settings.PRECEDENCE_CHOICES)})"
        )

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config = {"precedence": args.precedence}
    failed = False
    for expression in args.expressions or SAMPLES:
        try:
            value = evaluate(expression, config)
        except ExpressionError as exc:
            failed = True
            print(f"{expression}: {exc.msg}", file=sys.stderr)
            continue
        print(f"{expression} = {value:g}")

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
