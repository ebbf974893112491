"""Equality policies for fractions

Two interchangeable ways of deciding whether two fractions are equal:

- structural: compare the normalized pairs field by field. Cheap, and exact
  for any value that went through the reducer, which every live fraction did.
- cross-multiplication: compare `a.n * b.d` with `b.n * a.d`. Exact even for
  operands that were never normalized.

Both products of the cross-multiplication policy are plain Python integers, so
unlike a fixed-width implementation the comparison itself never overflows.

"""


def structural_equals(a, b):
    """Compare the canonical (numerator, denominator) pairs

    >>> from rational import Rational
    >>> a = Rational(3, -4)
    >>> b = Rational(-6, 8)

    """
    return a.numerator == b.numerator and a.denominator == b.denominator

def cross_multiply_equals(a, b):
    """Compare `a.numerator * b.denominator` against `b.numerator * a.denominator`

    >>> from rational import Rational
    >>> a = Rational(1, 2)
    >>> b = Rational(2, 4)

    """
    return a.numerator * b.denominator == b.numerator * a.denominator

def compare(a, b):
    """Three-way comparison

    Denominators are positive, so the sign of the cross difference is the sign
    of `a - b`.

    Returns:
        -1, 0 or 1 as `a` is less than, equal to or greater than `b`

    """
    lhs = a.numerator * b.denominator
    rhs = b.numerator * a.denominator
    return (lhs > rhs) - (lhs < rhs)

def fraction_hash(a):
    """Hash of the canonical pair

    Equal canonical values share their pair, so this agrees with both policies.
    Whole numbers hash like the int they equal.

    """
    if a.denominator == 1:
        return hash(a.numerator)
    return hash((a.numerator, a.denominator))

POLICIES = {
    'structural': structural_equals,
    'cross': cross_multiply_equals,
}

def get_policy(name):
    """Look up an equality function by name

    Raises:
        ValueError: `name` is not one of `POLICIES`

    """
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f'unknown equality policy {name!r}, expected one of {sorted(POLICIES)}') from None
