import logging
import math
import numbers
import re
import typing

__all__ = [
    "Rational",
    "div_by",
    "parse",
    "negate",
    "add",
    "subtract",
    "multiply",
    "divide",
    "compare"
]

module_logger = logging.getLogger(__name__)

# int <-> str conversion is done in chunks below this size, so values past
# sys.get_int_max_str_digits() still format and parse
_CHUNK_DIGITS = 1000

_int_literal = re.compile(r"[+-]?[0-9]+")


def _check_integral(value, name):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(
            f"{name} must be an integer, got {value!r} of type {type(value)}")
    return int(value)


def _int_to_str(value: int) -> str:
    if value < 0:
        return "-" + _int_to_str(-value)
    digits = int(value.bit_length() * 0.30103) + 1
    if digits <= _CHUNK_DIGITS:
        return str(value)
    half = digits // 2
    high, low = divmod(value, 10 ** half)
    return _int_to_str(high) + _int_to_str(low).zfill(half)


def _digits_to_int(digits: str) -> int:
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)
    half = len(digits) // 2
    return (_digits_to_int(digits[:-half]) * 10 ** half +
            _digits_to_int(digits[-half:]))


def _parse_int(segment: str, rational_str: str) -> int:
    """
    Parse an optionally signed run of ASCII digits. Whitespace, ``_``
    separators and non-ASCII digits are rejected.
    """
    if _int_literal.fullmatch(segment) is None:
        raise ValueError(
            (f"Expecting rational in the form of 'n/d' or 'n', "
             f"was '{rational_str}'"))
    sign = -1 if segment[0] == "-" else 1
    return sign * _digits_to_int(segment.lstrip("+-"))


class Rational:
    """
    Immutable fraction, always stored in lowest terms with a positive
    denominator.

    Args:
        numerator (int)
        denominator (int): must be non-zero. Defaults to 1.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator, denominator=1):
        numerator = _check_integral(numerator, "numerator")
        denominator = _check_integral(denominator, "denominator")
        if denominator == 0:
            raise ValueError("Denominator must be non-zero")

        gcd = math.gcd(numerator, denominator)
        sign = 1 if denominator > 0 else -1
        self._numerator = sign * numerator // gcd
        self._denominator = sign * denominator // gcd

    def __float__(self):
        return self._numerator / self._denominator

    def __int__(self):
        # truncate toward zero, like int() on a float
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    def __bool__(self):
        return self._numerator != 0

    def __str__(self):
        if self._denominator == 1:
            return _int_to_str(self._numerator)
        return (f"{_int_to_str(self._numerator)}/"
                f"{_int_to_str(self._denominator)}")

    def __repr__(self):
        return (f"Rational({_int_to_str(self._numerator)}, "
                f"{_int_to_str(self._denominator)})")

    def __hash__(self):
        # whole numbers hash like the equal int
        if self._denominator == 1:
            return hash(self._numerator)
        return hash((self._numerator, self._denominator))

    @property
    def numerator(self):
        return self._numerator

    @property
    def nu(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    @property
    def de(self):
        return self._denominator

    @classmethod
    def _coerce(cls, other):
        if isinstance(other, Rational):
            return other
        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return cls(other)
        return None

    def __neg__(self):
        return Rational(-self._numerator, self._denominator)

    def __pos__(self):
        return self

    def __abs__(self):
        return Rational(abs(self._numerator), self._denominator)

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(
            self.nu * other.de + other.nu * self.de,
            self.de * other.de
        )

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(
            self.nu * other.de - other.nu * self.de,
            self.de * other.de
        )

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__sub__(self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Rational(self.nu * other.nu, self.de * other.de)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        if other.nu == 0:
            raise ValueError(f"Cannot divide {self} by zero")
        return Rational(self.nu * other.de, self.de * other.nu)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.__truediv__(self)

    def compare(self, other) -> int:
        """
        Three way comparison.

        Returns:
            int: -1, 0 or 1 as self is less than, equal to, or greater
                than other
        """
        coerced = self._coerce(other)
        if coerced is None:
            raise TypeError(f"Cannot compare Rational with {type(other)}")
        other = coerced
        diff = self.nu * other.de - other.nu * self.de
        return (diff > 0) - (diff < 0)

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return (self._numerator == other._numerator and
                self._denominator == other._denominator)

    def __lt__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if self._coerce(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    def between(self, lo, hi) -> bool:
        return lo <= self <= hi

    def range_to(self, end_inclusive):
        from .ranges import RationalRange
        return RationalRange(self, end_inclusive)

    @classmethod
    def from_str(cls, rational_str: typing.Any, delimiter: str = "/"):
        """
        Return a new instance of Rational if `rational_str` is a str.
        If `rational_str` is already a Rational object, just return that.

        Args:
            rational_str (str/Rational)
            delimiter (str)
        Returns:
            Rational
        """
        module_logger.debug((f"from_str: rational_str={rational_str!r}, "
                             f"delimiter={delimiter}"))
        if isinstance(rational_str, Rational):
            return rational_str
        if not isinstance(rational_str, str):
            raise TypeError(
                (f"Couldn't identify {rational_str} "
                 f"of type {type(rational_str)}"))

        if delimiter not in rational_str:
            return cls(_parse_int(rational_str, rational_str))
        parts = rational_str.split(delimiter)
        if len(parts) != 2:
            raise ValueError(
                (f"Expecting rational in the form of 'n/d' or 'n', "
                 f"was '{rational_str}'"))
        return cls(*[_parse_int(part, rational_str) for part in parts])


def div_by(numerator, denominator) -> Rational:
    """
    Build ``numerator/denominator``, so that ``div_by(1, 2)`` reads like
    the fraction it produces.
    """
    return Rational(numerator, denominator)


def parse(text: str) -> Rational:
    return Rational.from_str(text)


def negate(a: Rational) -> Rational:
    return -a


def add(a: Rational, b: Rational) -> Rational:
    return a + b


def subtract(a: Rational, b: Rational) -> Rational:
    return a - b


def multiply(a: Rational, b: Rational) -> Rational:
    return a * b


def divide(a: Rational, b: Rational) -> Rational:
    return a / b


def compare(a: Rational, b: Rational) -> int:
    return a.compare(b)
