import logging

from . import util
from .rational import Rational

module_logger = logging.getLogger(__name__)


__all__ = [
    "RationalRange"
]


class RationalRange:
    """
    Closed range of rationals, ``start <= x <= end_inclusive``.

    Bounds may be given as anything ``util.to_rational`` accepts.
    """

    __slots__ = ("_start", "_end_inclusive")

    def __init__(self, start: util.rational_type,
                 end_inclusive: util.rational_type):
        module_logger.debug((f"RationalRange.__init__: start={start!r}, "
                             f"end_inclusive={end_inclusive!r}"))
        self._start = util.to_rational(start)
        self._end_inclusive = util.to_rational(end_inclusive)

    @property
    def start(self) -> Rational:
        return self._start

    @property
    def end_inclusive(self) -> Rational:
        return self._end_inclusive

    def is_empty(self) -> bool:
        return self._start > self._end_inclusive

    def __contains__(self, value: util.rational_type) -> bool:
        return util.to_rational(value).between(
            self._start, self._end_inclusive)

    def __eq__(self, other):
        if not isinstance(other, RationalRange):
            return NotImplemented
        if self.is_empty() and other.is_empty():
            return True
        return (self._start == other._start and
                self._end_inclusive == other._end_inclusive)

    def __hash__(self):
        if self.is_empty():
            return hash(None)
        return hash((self._start, self._end_inclusive))

    def __str__(self):
        return f"{self._start}..{self._end_inclusive}"

    def __repr__(self):
        return f"RationalRange({self._start!r}, {self._end_inclusive!r})"
