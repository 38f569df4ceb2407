import argparse
import logging
import operator

from .rational import Rational

module_logger = logging.getLogger(__name__)

operators = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "cmp": Rational.compare
}


def create_parser():

    parser = argparse.ArgumentParser(
        description="combine two rational numbers",
        epilog="use '--' before a negative left operand, e.g. -- -1/2 + 1/3")

    parser.add_argument("left", type=str,
                        help="left operand, as 'n/d' or 'n'")

    parser.add_argument("op", choices=list(operators.keys()))

    parser.add_argument("right", type=str,
                        help="right operand, as 'n/d' or 'n'")

    parser.add_argument("-v", "--verbose",
                        dest="verbose", action="store_true")

    return parser


def calculate(left: str, op: str, right: str) -> str:
    module_logger.debug(f"calculate: left={left}, op={op}, right={right}")
    result = operators[op](Rational.from_str(left), Rational.from_str(right))
    module_logger.debug(f"calculate: result={result!r}")
    return str(result)


def main(argv=None):

    parser = create_parser()
    parsed = parser.parse_args(argv)
    level = logging.ERROR
    if parsed.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level)

    try:
        result = calculate(parsed.left, parsed.op, parsed.right)
    except ValueError as err:
        module_logger.error(str(err))
        parser.error(str(err))
    print(result)


if __name__ == "__main__":
    main()
