__version__ = "0.1.0"

from . import util
from .rational import (
    Rational,
    div_by,
    parse,
    negate,
    add,
    subtract,
    multiply,
    divide,
    compare
)
from .ranges import RationalRange

__all__ = [
    "util",
    "Rational",
    "RationalRange",
    "div_by",
    "parse",
    "negate",
    "add",
    "subtract",
    "multiply",
    "divide",
    "compare"
]
