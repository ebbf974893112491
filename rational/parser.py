"""Parse fractions written as `<numerator>/<denominator>`

The text form is the one produced by `Rational.to_text`: two integers separated
by a single `/`, with an optional sign on each and no whitespace.

- `"3/4"`, `"-3/4"` and `"3/-4"` are accepted
- `"3 / 4"`, `"0.5/1"`, `"1/2/3"` and `"3"` are rejected

"""

import logging
import re

from .errors import ArithmeticOverflow, MalformedFraction
from .fraction import Rational
from .reducer import check_range

log = logging.getLogger(__name__)

INTEGER = re.compile(r'[+-]?[0-9]+')


def parse(text, cls=Rational):
    """Parse `text` into a fraction

    Args:
        text (str): the fraction text
        cls (type): the fraction class to build

    Returns:
        r (Rational): an instance of `cls`

    Raises:
        MalformedFraction: `text` is not two `/`-separated integers, or an
            integer does not fit in `cls.BITS` bits
        InvalidDenominator: the denominator is zero

    >>> text = '-6/8'
    >>> cls = Rational

    """
    if not isinstance(text, str):
        raise MalformedFraction(text, f'expected str, got {type(text).__name__}')
    tokens = text.split('/')
    if len(tokens) != 2:
        raise MalformedFraction(text, f'expected exactly one "/", found {len(tokens) - 1}')
    for token in tokens:
        if not INTEGER.fullmatch(token):
            raise MalformedFraction(text, f'{token!r} is not an integer')
    numerator, denominator = [int(token) for token in tokens]
    for token, value in zip(tokens, (numerator, denominator)):
        try:
            check_range(value, cls.BITS)
        except ArithmeticOverflow:
            raise MalformedFraction(text, f'{token!r} does not fit in {cls.BITS} bits') from None
    log.debug('parsed %r as %s/%s', text, numerator, denominator)
    return cls(numerator, denominator)

def from_integer(n, cls=Rational):
    """Build `n/1` without going through text"""
    return cls(n, 1)
