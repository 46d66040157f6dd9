import logging
import math

from utils import format_number

logger = logging.getLogger(__name__)


def check_exponent(exponent) -> int:
    """Normalize an exponent to a non-negative integer.

    Non-integral values are rounded (halves go up) and negative values are
    flipped; each correction is logged as a warning. Never raises.
    """
    if not math.isfinite(exponent):
        logger.warning("exponent '%s' is not a finite number, using '0'", exponent)
        return 0

    check = exponent
    rounded = math.floor(check + 0.5)
    if check != rounded:
        logger.warning("exponent '%s' was rounded to '%s'", format_number(exponent), rounded)
    check = rounded

    flipped = abs(check)
    if check != flipped:
        logger.warning("exponent '%s' was flipped to '%s'", check, flipped)
    return int(flipped)


class TermField:
    """One coefficient slot for a fixed exponent."""

    def __init__(self, exponent, id=None):
        self.id = id
        self.exponent = exponent

    @property
    def exponent(self):
        return self._exponent

    @exponent.setter
    def exponent(self, value):
        self._exponent = value
        self.checked_exponent = check_exponent(value)

    @property
    def label(self):
        # a bare constant term gets no "x"
        if self.checked_exponent == 0:
            return None
        if self.checked_exponent == 1:
            return "x"
        return f"x^{{{self.checked_exponent}}}"

    def __repr__(self):
        return f"TermField(exponent={self.exponent!r}, id={self.id!r})"
