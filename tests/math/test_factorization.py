from dedekind.math.factorization.all import Factors, factor, trial_division, pollard_rho, ecm, factor_over_integers, is_irreducible_over_integers
from dedekind.math.factorization.zassenhaus import hensel_lift
from dedekind.math.algebra.fields.prime_field import PrimeField
from dedekind.math.polynomial import Polynomial, X
from dedekind.utilities.exceptions import InvalidPolynomialException
from fractions import Fraction
import unittest


class IntegerFactorizationTestCase(unittest.TestCase):
    def test_factors(self):
        f = Factors({2: 3, 5: 1})
        self.assertEqual(f.recombine(), 40)
        self.assertEqual((f * Factors({5: 2, 7: 1})).recombine(), 7000)
        self.assertEqual(Factors({2: 2, 3: 1}).divisors(), [1, 2, 3, 4, 6, 12])
        self.assertEqual(list(Factors({7: 1, 2: 1})), [2, 7])


    def test_trial_division(self):
        facs, cofactor = trial_division(2**5 * 3 * 1000003)
        self.assertEqual(facs, {2: 5, 3: 1})
        self.assertEqual(cofactor, 1000003)


    def test_factor(self):
        self.assertEqual(factor(36355439941184), {2: 6, 7: 1, 13: 1, 149: 1, 41894959: 1})
        self.assertEqual(factor(-1132), {2: 2, 283: 1})
        self.assertEqual(factor(1), {})
        self.assertEqual(factor(1000003**2), {1000003: 2})
        self.assertEqual(factor(1000003 * 1000033), {1000003: 1, 1000033: 1})


    def test_factor_zero(self):
        with self.assertRaises(ValueError):
            factor(0)


    def test_pollard_rho(self):
        n = 1000003 * 1000033
        d = pollard_rho(n)
        self.assertIn(d, (1000003, 1000033))


    def test_ecm(self):
        n = 1000003 * 1000033
        d = ecm(n)
        self.assertIn(d, (1000003, 1000033))



class PolynomialFactorizationTestCase(unittest.TestCase):
    def test_cyclotomic_split(self):
        self.assertEqual(factor_over_integers(X**4 - 1), [(X - 1, 1), (X + 1, 1), (X**2 + 1, 1)])


    def test_multiplicities(self):
        f = (X**2 + 1)**2 * (X - 2)
        self.assertEqual(factor_over_integers(f), [(X - 2, 1), (X**2 + 1, 2)])


    def test_recombination(self):
        # x^4 + 1 splits modulo every prime but is irreducible
        self.assertTrue(is_irreducible_over_integers(X**4 + 1))

        facs = factor_over_integers(X**4 + 4)
        self.assertEqual(facs, [(X**2 - 2*X + 2, 1), (X**2 + 2*X + 2, 1)])


    def test_rational_coefficients(self):
        f = X**2 - Fraction(1, 4)
        self.assertEqual(factor_over_integers(f), [(2*X - 1, 1), (2*X + 1, 1)])


    def test_irreducible(self):
        self.assertTrue(is_irreducible_over_integers(Polynomial([-1, -1, 0, 1])))
        self.assertFalse(is_irreducible_over_integers(X**2 - 1))
        self.assertFalse(is_irreducible_over_integers(Polynomial([7])))


    def test_constant(self):
        with self.assertRaises(InvalidPolynomialException):
            factor_over_integers(Polynomial([3]))


    def test_hensel_lift(self):
        f    = [1, 0, 0, 0, 1]
        F    = PrimeField(17)
        facs = [g for g, _ in F.factor(f)]
        k    = 4
        pk   = 17**k

        lifted = hensel_lift(f, facs, 17, k)
        prod   = [1]
        for g in lifted:
            self.assertEqual(g[-1] % pk, 1)
            prod = [c % pk for c in Polynomial(prod) * Polynomial(g)]

        self.assertEqual([int(c) % pk for c in prod], f)
