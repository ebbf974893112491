import logging
import sys
import traceback

from .equality import compare, cross_multiply_equals, structural_equals
from .errors import (ArithmeticOverflow, DivisionByZero, InvalidDenominator,
                     MalformedFraction, RationalError)
from .fraction import (CrossRational, LongCrossRational, LongRational,
                       Rational, rational_type)
from .parser import from_integer, parse
from .reducer import gcd, reduce

logging.getLogger(__name__).addHandler(logging.NullHandler())


def handle_exception(type, value, tb):
    # Fraction errors are bad input, not bugs.
    if issubclass(type, RationalError):
        logging.error(f'{type.__name__}: {value}')
        return

    # Print stack trace.
    info = traceback.format_exception(type, value, tb)
    logging.error(''.join(info))

def register():
    sys.excepthook = handle_exception
