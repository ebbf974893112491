"""Errors raised by the rational number kernel

Every kind derives from `RationalError` so callers can catch them all at once,
and from the builtin exception that best describes it so code written against
plain Python numbers keeps working.

"""


class RationalError(ArithmeticError):
    """Base class for every error raised by this package"""


class InvalidDenominator(RationalError, ValueError):
    """A fraction was constructed with a zero denominator"""

    def __init__(self, numerator=None):
        self.numerator = numerator
        super(__class__, self).__init__(f'denominator of {numerator}/0 cannot be zero')


class DivisionByZero(RationalError, ZeroDivisionError):
    """The divisor of a fraction division represents zero"""

    def __init__(self, dividend=None):
        self.dividend = dividend
        super(__class__, self).__init__(f'cannot divide {dividend} by zero')


class MalformedFraction(RationalError, ValueError):
    """Text could not be read as `<numerator>/<denominator>`"""

    def __init__(self, text, reason='expected <numerator>/<denominator>'):
        self.text = text
        self.reason = reason
        super(__class__, self).__init__(f'malformed fraction {text!r}: {reason}')


class ArithmeticOverflow(RationalError, OverflowError):
    """An intermediate result does not fit in the fraction's integer width"""

    def __init__(self, value, bits):
        self.value = value
        self.bits = bits
        super(__class__, self).__init__(f'{value} does not fit in a signed {bits}-bit integer')
