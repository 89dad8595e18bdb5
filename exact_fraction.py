"""
Exact Fraction helpers

Agent positions are kept as fractions.Fraction so that the midpoint test
(position < 1/2) is decided exactly. Fraction already stores values in lowest
terms with a positive denominator and implements +, *, < and == without
rounding; this module adds the precondition checks and the midpoint test used
by the rest of the project.

Floats are produced only for cost evaluation and plotting (to_real), never for
classification.
"""

from fractions import Fraction
from numbers import Integral

from data_models import InstanceError

HALF = Fraction(1, 2)


def make_fraction(numerator: int, denominator: int) -> Fraction:
    """
    Build a reduced fraction from integer parts.

    Args:
        numerator: Integer numerator
        denominator: Integer denominator, must be nonzero

    Returns:
        Fraction in lowest terms with a positive denominator

    Raises:
        InstanceError: if a part is not an integer or the denominator is zero
    """
    if not isinstance(numerator, Integral) or not isinstance(denominator, Integral):
        raise InstanceError(f"Fraction parts must be integers, got {numerator!r}/{denominator!r}")
    if denominator == 0:
        raise InstanceError(f"Zero denominator in fraction {numerator}/{denominator}")
    return Fraction(int(numerator), int(denominator))


def is_near_zero(position: Fraction) -> bool:
    """True when the position lies strictly left of the midpoint 1/2."""
    return position < HALF


def to_real(position: Fraction) -> float:
    return float(position)
