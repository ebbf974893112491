"""Reduction of numerator/denominator pairs to canonical form

The canonical form of a fraction has a strictly positive denominator, carries
its sign in the numerator and has coprime magnitudes. Zero is always `(0, 1)`.

All integers live in a fixed signed width (32 or 64 bits). Python integers
never wrap, so instead of reproducing wraparound every intermediate result is
checked with `check_range` and rejected with `ArithmeticOverflow`.

"""

import logging

from .errors import ArithmeticOverflow, InvalidDenominator

log = logging.getLogger(__name__)


def bounds(bits):
    """Return the (smallest, largest) value of a signed `bits`-bit integer

    >>> bits = 32

    """
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1

def check_range(value, bits):
    """Return `value` unchanged if it fits in a signed `bits`-bit integer

    Raises:
        ArithmeticOverflow: when it does not

    """
    lo, hi = bounds(bits)
    if not lo <= value <= hi:
        raise ArithmeticOverflow(value, bits)
    return value

def gcd(a, b):
    """Compute the greatest common divisor with the Euclidean algorithm

    Args:
        a (int): non-negative integer
        b (int): non-negative integer

    Returns:
        g (int): gcd(a, b), with gcd(0, b) == b

    >>> a = 12
    >>> b = 18

    """
    while b != 0:
        a, b = b, a % b
    return a

def gcd_recursive(a, b):
    """Recursive form of `gcd`; both always agree"""
    return a if b == 0 else gcd_recursive(b, a % b)

def reduce(numerator, denominator, bits=64):
    """Normalize a raw numerator/denominator pair

    Args:
        numerator (int): raw numerator
        denominator (int): raw denominator, must not be zero
        bits (int): integer width every value must fit in

    Returns:
        pair (tuple): `(numerator', denominator')` with `denominator' > 0` and
        `gcd(|numerator'|, denominator') == 1`

    Raises:
        InvalidDenominator: `denominator` is zero
        ArithmeticOverflow: an input, or the sign flip of one, is out of range

    >>> numerator = 6
    >>> denominator = -8
    >>> bits = 32

    """
    if denominator == 0:
        raise InvalidDenominator(numerator)
    check_range(numerator, bits)
    check_range(denominator, bits)

    if denominator < 0:
        # -MIN is the one negation that leaves the range
        numerator = check_range(-numerator, bits)
        denominator = check_range(-denominator, bits)

    g = gcd(abs(numerator), denominator)
    pair = numerator // g, denominator // g
    log.debug('reduced %s/%s to %s/%s', numerator, denominator, *pair)
    return pair
