import math
import itertools
from fractions import Fraction

import pytest

from rationals import Rational, of, ZERO, ONE, APPROX_ZERO, APPROX_ONE, errors


VALUES = [of(0), of(1), of(-1), of(1, 2), of(-2, 3), of(7, 5), of(10**20, 3), of(-1, 10**15)]


def test_add():
    assert of(1, 3).add(of(1, 6)) == of(1, 2)
    # denominators sharing a factor
    assert of(1, 6) + of(1, 10) == of(4, 15)
    assert of(1, 4) + of(3, 4) == ONE
    assert of(1, 4).add(1) == of(5, 4)


def test_subtract():
    assert of(1, 2).subtract(of(1, 3)) == of(1, 6)
    assert of(1, 3) - of(1, 2) == of(-1, 6)
    assert of(3, 4) - of(3, 4) == ZERO


def test_multiply_divide():
    assert of(2, 3).multiply(of(9, 4)) == of(3, 2)
    assert of(2, 3).divide(of(4, 9)) == of(3, 2)
    assert of(-2, 3) / of(2, -3) == ONE
    with pytest.raises(errors.DivisionByZero):
        ONE.divide(ZERO)
    with pytest.raises(ZeroDivisionError):
        of(1, 2) / 0


def test_negate_inverse_abs():
    assert of(1, 2).negate() == of(-1, 2)
    assert ZERO.negate() is ZERO
    r = of(-3, 4).inverse()
    assert (r.numerator, r.denominator) == (-4, 3)
    assert of(5).inverse() == of(1, 5)
    with pytest.raises(errors.DivisionByZero):
        ZERO.inverse()
    assert of(-3, 4).abs() == of(3, 4)
    assert of(-3, 4).magnitude() == of(3, 4)
    assert abs(of(-7)) == 7


def test_signum():
    assert of(-3, 4).signum() == -1
    assert ZERO.signum() == 0
    assert of(1, 10**30).signum() == 1


def test_pow():
    assert of(5, 2).pow(-2) == of(4, 25)
    r = of(-2, 3).pow(-3)
    assert (r.numerator, r.denominator) == (-27, 8)
    assert of(-2, 3).pow(2) == of(4, 9)
    assert of(7, 3).pow(1) == of(7, 3)
    assert ZERO.pow(3) == ZERO
    with pytest.raises(errors.DivisionByZero):
        ZERO.pow(-1)


def test_pow_zero_exponent():
    assert ZERO.pow(0) is ONE
    assert of(-7, 3).pow(0) is ONE
    r = of(0.1).pow(0)
    assert r == ONE
    assert not r.isApproximate()


@pytest.mark.parametrize('a, b', itertools.product(VALUES, VALUES))
def test_identities(a, b):
    assert a.add(b).subtract(b) == a
    assert a.add(b) == b.add(a)
    assert a.multiply(b) == b.multiply(a)
    assert a.add(a.negate()) == ZERO
    if not b.isZero():
        assert a.multiply(b).divide(b) == a
    if not a.isZero():
        assert a.multiply(a.inverse()) == ONE
        assert a.pow(-2) == a.inverse().pow(2)


def test_results_are_canonical():
    for a, b in itertools.product(VALUES, VALUES):
        results = [a + b, a - b, a * b]
        if not b.isZero():
            results.append(a / b)
        for r in results:
            assert r.denominator > 0
            assert math.gcd(r.numerator, r.denominator) == 1


def test_exact_operations_stay_exact():
    a, b = of(1, 3), of(-5, 7)
    for r in (a + b, a - b, a * b, a / b, a.pow(3), a.pow(-2), -a, a.inverse(), abs(b)):
        assert not r.isApproximate()


def test_approximation_propagates():
    exact = of(1, 3)
    approx = of(0.5)
    results = [
        exact.add(approx), approx.add(exact),
        exact.subtract(approx), approx.subtract(exact),
        exact.multiply(approx), approx.multiply(exact),
        exact.divide(approx), approx.divide(exact),
        approx.negate(), approx.inverse(), approx.abs(), approx.pow(3), approx.pow(-1),
        exact + 0.5, 0.5 + exact,
    ]
    for r in results:
        assert r.isApproximate()


def test_approximate_neutral_elements():
    x = of(3, 7)
    assert x.add(APPROX_ZERO) == x
    assert x.add(APPROX_ZERO).isApproximate()
    assert x.multiply(APPROX_ONE).isApproximate()
    # multiplying by an approximate zero does not make the result exact
    assert x.multiply(APPROX_ZERO).isApproximate()


def test_add_all_multiply_all():
    assert ONE.addAll(of(1, 2), of(1, 4)) == of(7, 4)
    assert ONE.addAll([of(1, 2), of(1, 4)]) == of(7, 4)
    assert ONE.addAll() is ONE
    assert of(2).multiplyAll(of(1, 2), 3, '1/3') == ONE
    assert of(2).multiplyAll(x for x in (of(3), of(5))) == 30
    assert ZERO.addAll(0.5).isApproximate()


def test_min_max():
    a, b, c = of(1, 2), of(1, 3), of(2, 4)
    assert a.min(b) is b
    assert b.min(a) is b
    assert a.min(c) is a
    assert c.min(a) is c
    assert a.max(b) is a
    assert c.max(a) is c
    assert b.max(1) == ONE


class TestOperators:
    def test_mixed_operands(self):
        assert of(1, 2) + 1 == of(3, 2)
        assert 1 - of(1, 2) == of(1, 2)
        assert 2 / of(1, 2) == 4
        assert 3 * of(1, 3) == 1
        r = of(1, 3) * 0.5
        assert r == of(1, 6)
        assert r.isApproximate()

    def test_result_type(self):
        for r in (of(1, 2) + 1, 1 + of(1, 2), Fraction(1, 2) + of(1, 3), of(1, 3) - Fraction(1, 2),
                  0.5 * of(2), of(2) / 0.25):
            assert isinstance(r, Rational)
        assert Fraction(1, 2) + of(1, 3) == of(5, 6)

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            of(1, 2) + 'a'
        with pytest.raises(TypeError):
            of(1, 2) * None
        with pytest.raises(TypeError):
            [1] * of(2)

    def test_floordiv_mod(self):
        assert of(7, 2) // 1 == 3
        assert of(-7, 2) // 1 == -4
        assert of(7, 2) % 1 == of(1, 2)
        assert of(-7, 2) % 1 == of(1, 2)
        assert divmod(of(7, 3), of(1, 2)) == (4, of(1, 3))
        assert 5 // of(3, 2) == 3
        assert 5 % of(3, 2) == of(1, 2)
        with pytest.raises(errors.DivisionByZero):
            of(1, 2) // 0
        # same results as Fraction
        for a, b in itertools.product(VALUES, VALUES):
            if b.isZero():
                continue
            fa, fb = Fraction(a.numerator, a.denominator), Fraction(b.numerator, b.denominator)
            assert a // b == fa // fb
            assert a % b == fa % fb

    def test_pow_operator(self):
        r = of(2) ** 3
        assert r == 8 and not r.isApproximate()
        assert of(5, 2) ** -2 == of(4, 25)
        assert 2 ** of(3) == 8
        r = of(4) ** of(1, 2)
        assert r == 2
        assert r.isApproximate()
        with pytest.raises(errors.InvalidValue):
            of(-4) ** of(1, 2)
        with pytest.raises(errors.DivisionByZero):
            ZERO ** -1

    def test_unary(self):
        r = of(-3, 4)
        assert -r == of(3, 4)
        assert +r is r
        assert abs(r) == of(3, 4)

    def test_rounding(self):
        assert round(of(5, 2)) == 2
        assert round(of(7, 2)) == 4
        assert round(of(-5, 2)) == -2
        assert round(of(8, 3)) == 3
        assert type(round(of(8, 3))) is int
        assert round(of(1234, 1000), 2) == of(123, 100)
        assert round(of(1250), -2) == 1200
        assert round(of(1350), -2) == 1400
        assert round(of(0.125), 2).isApproximate()
        assert math.floor(of(-7, 2)) == -4
        assert math.ceil(of(-7, 2)) == -3
        assert math.trunc(of(-7, 2)) == -3
        assert int(of(-7, 2)) == -3
        assert math.floor(of(7, 2)) == 3
        assert math.ceil(of(7, 2)) == 4

    def test_bool(self):
        assert not ZERO
        assert not APPROX_ZERO
        assert of(1, 10**9)


class TestVersusFloatingPoint:
    def test_simple_sum(self):
        assert of(1, 10).add(of(2, 10)) == of(3, 10)
        assert of('0.1') + of('0.2') == of('0.3')

    def test_error_propagation(self):
        # with floats, x = a*x - b diverges after a few dozen iterations
        b = of(40951, 10)
        a = b.add(ONE)
        x = ONE
        for _ in range(100):
            x = a.multiply(x).subtract(b)
            assert x == ONE

    def test_associativity(self):
        terms = [ONE.divide(of(i).multiply(of(i))) for i in range(1, 301)]
        forward = ZERO
        for term in terms:
            forward = forward.add(term)
        backward = ZERO
        for term in reversed(terms):
            backward = backward.add(term)
        assert forward == backward

    def test_large_values(self):
        a = of(1, 10**10)
        b = of(9 * 10**307)
        c = of(9 * 10**307)
        expected = of(18 * 10**297)
        direct = a.multiply(b.add(c))
        split = a.multiply(b).add(a.multiply(c))
        assert direct == expected
        assert split == expected

    def test_muller_kahan_recurrence(self):
        # converges to 100 with floats, to 6 with exact arithmetic
        limit = of(6)
        x0, x1 = of(11, 2), of(61, 11)
        lastDelta = None
        for _ in range(60):
            x2 = of(111).subtract(of(1130).subtract(of(3000).divide(x0)).divide(x1))
            x0, x1 = x1, x2
            delta = limit.subtract(x2)
            assert delta.lt(ONE)
            if lastDelta is not None:
                assert delta.lt(lastDelta)
            lastDelta = delta
