"""Class for rational numbers.

A rational number is the ratio of two integers. Examples of rational numbers
include...

- 3/2
- -1/1
- 4/6, which is stored as 2/3

Every instance is normalized at construction time: the denominator is
positive, the sign lives in the numerator and the two share no common factor.
Instances are immutable, so every operation returns a new fraction.

Four concrete classes combine the two equality policies with two integer
widths:

- `Rational`: structural equality, 32-bit
- `CrossRational`: cross-multiplication equality, 32-bit
- `LongRational`: structural equality, 64-bit
- `LongCrossRational`: cross-multiplication equality, 64-bit

"""

import functools
import operator
import struct

from .equality import compare, cross_multiply_equals, fraction_hash, get_policy, structural_equals
from .errors import DivisionByZero
from .reducer import check_range, reduce


@functools.total_ordering
class Rational:
    """Immutable fraction with structural equality and 32-bit components"""

    __slots__ = ('_numerator', '_denominator')

    BITS = 32
    equality = staticmethod(structural_equals)

    def __new__(cls, numerator, denominator=1):
        """Constructor

        There is no `__init__`, so a built instance cannot be re-initialized.

        Args:
            numerator (int): numerator, any sign
            denominator (int): denominator, any sign but zero

        Raises:
            InvalidDenominator: `denominator` is zero
            ArithmeticOverflow: a component does not fit in `BITS` bits
            TypeError: a component is not an integer

        >>> cls = Rational
        >>> numerator = 4
        >>> denominator = -6

        """
        n, d = reduce(operator.index(numerator), operator.index(denominator), cls.BITS)
        self = super(Rational, cls).__new__(cls)
        object.__setattr__(self, '_numerator', n)
        object.__setattr__(self, '_denominator', d)
        return self

    @classmethod
    def parse(cls, text):
        """Read `<numerator>/<denominator>` into an instance of `cls`"""
        from .parser import parse
        return parse(text, cls)

    @classmethod
    def from_integer(cls, n):
        from .parser import from_integer
        return from_integer(n, cls)

    @property
    def numerator(self):
        return self._numerator

    @property
    def denominator(self):
        return self._denominator

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def _checked(self, value):
        return check_range(value, self.BITS)

    def _coerce(self, other):
        """Return `other` as a fraction, or None if it is not a number we know"""
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return type(self).from_integer(other)
        return None

    # Arithmetic

    def add(self, other):
        """Return `self + other`

        >>> self = Rational(1, 2)
        >>> other = Rational(1, 3)

        """
        c = self._checked
        n = c(c(self._numerator * other.denominator) + c(other.numerator * self._denominator))
        d = c(self._denominator * other.denominator)
        return type(self)(n, d)

    def subtract(self, other):
        """Return `self - other`"""
        c = self._checked
        n = c(c(self._numerator * other.denominator) - c(other.numerator * self._denominator))
        d = c(self._denominator * other.denominator)
        return type(self)(n, d)

    def subtract_int(self, n):
        """Return `self - n` for an integer `n`

        Same result as `self.subtract(self.from_integer(n))`, without building
        the intermediate fraction.

        >>> self = Rational(7, 2)
        >>> n = 3

        """
        c = self._checked
        return type(self)(c(self._numerator - c(c(n) * self._denominator)), self._denominator)

    def multiply(self, other):
        c = self._checked
        return type(self)(c(self._numerator * other.numerator), c(self._denominator * other.denominator))

    def divide(self, other):
        """Return `self / other`

        Raises:
            DivisionByZero: `other` is zero

        >>> self = Rational(1, 2)
        >>> other = Rational(1, 3)

        """
        if other.numerator == 0:
            raise DivisionByZero(self)
        c = self._checked
        return type(self)(c(self._numerator * other.denominator), c(self._denominator * other.numerator))

    def __add__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        if isinstance(other, int):
            return self.subtract_int(other)
        other = self._coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.multiply(self)

    def __truediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.divide(self)

    def __neg__(self):
        return type(self)(self._checked(-self._numerator), self._denominator)

    def __pos__(self):
        return self

    def __abs__(self):
        return -self if self._numerator < 0 else self

    # Coercions

    def _truncate(self):
        q = abs(self._numerator) // self._denominator
        return -q if self._numerator < 0 else q

    def to_int(self):
        """Truncate toward zero into a signed 32-bit integer

        Raises:
            ArithmeticOverflow: the quotient does not fit in 32 bits

        >>> self = Rational(-7, 2)

        """
        return check_range(self._truncate(), 32)

    def to_long(self):
        """Truncate toward zero into a signed 64-bit integer"""
        return check_range(self._truncate(), 64)

    def to_float(self):
        """Divide in floating point and round to single precision

        The integer quotient is rounded once to double precision, then that
        double is rounded to single precision. The operands are never
        converted to single precision first.

        """
        q, = struct.unpack('f', struct.pack('f', self._numerator / self._denominator))
        return q

    def to_double(self):
        return self._numerator / self._denominator

    def to_text(self):
        return f'{self._numerator}/{self._denominator}'

    def __int__(self):
        return self.to_long()

    def __float__(self):
        return self.to_double()

    def __bool__(self):
        return self._numerator != 0

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f'{type(self).__name__}({self._numerator}, {self._denominator})'

    # Comparison

    def __eq__(self, other):
        # ints carry numerator/denominator attributes of their own
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return self.equality(self, other)

    def __lt__(self, other):
        if not isinstance(other, (Rational, int)):
            return NotImplemented
        return compare(self, other) < 0

    def __hash__(self):
        return fraction_hash(self)

    # Copying

    def clone(self):
        """Return an equal but distinct instance"""
        return type(self)(self._numerator, self._denominator)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return type(self), (self._numerator, self._denominator)


class CrossRational(Rational):
    """Fraction compared by cross-multiplication"""

    __slots__ = ()

    equality = staticmethod(cross_multiply_equals)


class LongRational(Rational):
    """Fraction with 64-bit components"""

    __slots__ = ()

    BITS = 64


class LongCrossRational(LongRational):
    """Fraction with 64-bit components compared by cross-multiplication"""

    __slots__ = ()

    equality = staticmethod(cross_multiply_equals)


TYPES = {
    ('structural', 32): Rational,
    ('cross', 32): CrossRational,
    ('structural', 64): LongRational,
    ('cross', 64): LongCrossRational,
}

def rational_type(equality='structural', bits=32):
    """Pick the fraction class for an equality policy and integer width

    Args:
        equality (str): 'structural' or 'cross'
        bits (int): 32 or 64

    Returns:
        cls (type): one of the classes in `TYPES`

    Raises:
        ValueError: unknown policy or width

    """
    get_policy(equality)
    try:
        return TYPES[equality, int(bits)]
    except KeyError:
        raise ValueError(f'unsupported width {bits}, expected 32 or 64') from None
