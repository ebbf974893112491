import copy
import pickle
import random
from unittest import TestCase

from rational import (ArithmeticOverflow, CrossRational, DivisionByZero,
                      InvalidDenominator, LongCrossRational, LongRational,
                      Rational, rational_type)
from rational.reducer import gcd


def random_fractions(seed, count=200, limit=1000):
    rng = random.Random(seed)
    for _ in range(count):
        yield Rational(rng.randint(-limit, limit), rng.choice([-1, 1]) * rng.randint(1, limit))


class TestConstruct(TestCase):
    def test_normalized(self):
        for x in random_fractions(0):
            self.assertGreater(x.denominator, 0)
            self.assertEqual(gcd(abs(x.numerator), x.denominator), 1)

    def test_sign(self):
        r = Rational(3, -4)
        self.assertEqual((r.numerator, r.denominator), (-3, 4))
        self.assertEqual(r, Rational(-3, 4))

    def test_default_denominator(self):
        self.assertEqual(Rational(7).to_text(), '7/1')

    def test_zero_denominator(self):
        with self.assertRaises(InvalidDenominator):
            Rational(5, 0)

    def test_zero_denominator_is_value_error(self):
        with self.assertRaises(ValueError):
            Rational(5, 0)

    def test_not_integer(self):
        with self.assertRaises(TypeError):
            Rational(0.5, 1)

    def test_out_of_range(self):
        with self.assertRaises(ArithmeticOverflow):
            Rational(2**31, 1)
        self.assertEqual(LongRational(2**31, 1).numerator, 2**31)

    def test_immutable(self):
        r = Rational(1, 2)
        with self.assertRaises(AttributeError):
            r.numerator = 3
        with self.assertRaises(AttributeError):
            r._numerator = 3
        self.assertEqual(r.to_text(), '1/2')

    def test_reinitialize(self):
        r = Rational(1, 2)
        s = {r}
        r.__init__(5, 7)
        self.assertEqual(r.to_text(), '1/2')
        self.assertIn(Rational(1, 2), s)

    def test_subclass_new(self):
        r = LongCrossRational(4, -6)
        self.assertIs(type(r), LongCrossRational)
        self.assertEqual(r.to_text(), '-2/3')

class TestArithmetic(TestCase):
    def test_add(self):
        r = Rational(1, 2).add(Rational(1, 3))
        self.assertEqual((r.numerator, r.denominator), (5, 6))

    def test_subtract(self):
        self.assertEqual(Rational(1, 2).subtract(Rational(1, 3)), Rational(1, 6))

    def test_multiply(self):
        self.assertEqual(Rational(2, 3).multiply(Rational(3, 4)), Rational(1, 2))

    def test_divide(self):
        r = Rational(1, 2).divide(Rational(1, 3))
        self.assertEqual((r.numerator, r.denominator), (3, 2))

    def test_divide_negative(self):
        r = Rational(1, 2).divide(Rational(-1, 3))
        self.assertEqual((r.numerator, r.denominator), (-3, 2))

    def test_divide_by_zero(self):
        with self.assertRaises(DivisionByZero):
            Rational(1, 2).divide(Rational(0, 5))
        with self.assertRaises(ZeroDivisionError):
            Rational(1, 2) / 0

    def test_subtract_int(self):
        r = Rational(7, 2).subtract_int(3)
        self.assertEqual((r.numerator, r.denominator), (1, 2))

    def test_subtract_int_consistent(self):
        for n, x in enumerate(random_fractions(1)):
            n -= 100
            self.assertEqual(x.subtract_int(n), x.subtract(Rational.from_integer(n)))

    def test_identities(self):
        zero, one = Rational(0, 1), Rational(1, 1)
        for x in random_fractions(2):
            self.assertEqual(x.add(zero), x)
            self.assertEqual(x.multiply(one), x)

    def test_division_inverse(self):
        xs = list(random_fractions(3))
        ys = [y for y in random_fractions(4) if y]
        for x, y in zip(xs, ys):
            self.assertTrue(CrossRational(x.numerator, x.denominator).divide(y).multiply(y) == x)

    def test_results_are_new(self):
        x = Rational(1, 2)
        y = x.add(Rational(0, 1))
        self.assertIsNot(x, y)
        self.assertEqual(x, y)

    def test_operators(self):
        a, b = Rational(1, 2), Rational(1, 3)
        self.assertEqual(a + b, Rational(5, 6))
        self.assertEqual(a - b, Rational(1, 6))
        self.assertEqual(a * b, Rational(1, 6))
        self.assertEqual(a / b, Rational(3, 2))
        self.assertEqual(-a, Rational(-1, 2))
        self.assertEqual(abs(Rational(-1, 2)), a)

    def test_operators_with_int(self):
        a = Rational(1, 2)
        self.assertEqual(a + 1, Rational(3, 2))
        self.assertEqual(1 + a, Rational(3, 2))
        self.assertEqual(a - 1, Rational(-1, 2))
        self.assertEqual(1 - a, Rational(1, 2))
        self.assertEqual(3 * a, Rational(3, 2))
        self.assertEqual(1 / a, Rational(2, 1))

    def test_unsupported_operand(self):
        with self.assertRaises(TypeError):
            Rational(1, 2) + 0.5

    def test_result_type(self):
        self.assertIsInstance(CrossRational(1, 2) + Rational(1, 3), CrossRational)
        self.assertIsInstance(LongRational(1, 2) * 2, LongRational)

class TestOverflow(TestCase):
    def test_add_overflows(self):
        big = Rational(2**31 - 1, 1)
        with self.assertRaises(ArithmeticOverflow):
            big.add(Rational(1, 1))

    def test_product_overflows(self):
        a, b = Rational(1, 65536), Rational(1, 65537)
        with self.assertRaises(ArithmeticOverflow):
            a.multiply(b)

    def test_long_does_not_overflow(self):
        r = LongRational(1, 65536).multiply(LongRational(1, 65537))
        self.assertEqual(r.denominator, 65536 * 65537)

    def test_negate_minimum(self):
        with self.assertRaises(ArithmeticOverflow):
            -Rational(-2**31, 1)

    def test_subtract_int_overflows(self):
        with self.assertRaises(ArithmeticOverflow):
            Rational(1, 2).subtract_int(2**31 - 1)

class TestCoercions(TestCase):
    def test_truncate_toward_zero(self):
        self.assertEqual(Rational(7, 2).to_int(), 3)
        self.assertEqual(Rational(-7, 2).to_int(), -3)
        self.assertEqual(Rational(-7, 2).to_long(), -3)
        self.assertEqual(int(Rational(-1, 3)), 0)

    def test_to_int_range(self):
        r = LongRational(2**40, 3)
        self.assertEqual(r.to_long(), 2**40 // 3)
        with self.assertRaises(ArithmeticOverflow):
            r.to_int()

    def test_floats(self):
        self.assertEqual(Rational(1, 4).to_double(), 0.25)
        self.assertEqual(Rational(1, 4).to_float(), 0.25)
        self.assertEqual(float(Rational(-3, 4)), -0.75)

    def test_float_is_single_precision(self):
        r = Rational(1, 3)
        self.assertNotEqual(r.to_float(), r.to_double())
        self.assertAlmostEqual(r.to_float(), r.to_double(), places=6)

    def test_text(self):
        self.assertEqual(Rational(6, -8).to_text(), '-3/4')
        self.assertEqual(str(Rational(6, -8)), '-3/4')
        self.assertEqual(repr(CrossRational(2, 4)), 'CrossRational(1, 2)')

    def test_bool(self):
        self.assertFalse(Rational(0, 3))
        self.assertTrue(Rational(1, 3))

class TestCopy(TestCase):
    def test_clone(self):
        r = Rational(1, 2)
        c = r.clone()
        self.assertIsNot(r, c)
        self.assertEqual(r, c)
        self.assertIs(type(c), Rational)

    def test_copy(self):
        r = LongCrossRational(1, 2)
        self.assertEqual(copy.copy(r), r)
        self.assertEqual(copy.deepcopy([r]), [r])

    def test_pickle(self):
        r = CrossRational(-3, 4)
        out = pickle.loads(pickle.dumps(r))
        self.assertIs(type(out), CrossRational)
        self.assertEqual(out.to_text(), '-3/4')

class TestRationalType(TestCase):
    def test_lookup(self):
        self.assertIs(rational_type(), Rational)
        self.assertIs(rational_type('cross', 32), CrossRational)
        self.assertIs(rational_type('structural', 64), LongRational)
        self.assertIs(rational_type('cross', 64), LongCrossRational)

    def test_unknown(self):
        with self.assertRaises(ValueError):
            rational_type('approximate')
        with self.assertRaises(ValueError):
            rational_type('cross', 16)
