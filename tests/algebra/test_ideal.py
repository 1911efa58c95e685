from dedekind.math.algebra.ideals.ideal import Ideal, PrimeIdeal
from dedekind.math.algebra.rings.order import Order, maximal_order
from dedekind.math.polynomial import X
from dedekind.utilities.exceptions import NotInvertibleException, InvariantViolationException
from fractions import Fraction
import unittest


class IdealTestCase(unittest.TestCase):
    def setUp(self):
        # Z[sqrt(-5)] is the maximal order of Q(sqrt(-5))
        self.O = Order(X**2 + 5)
        self.P = Ideal.from_elements(self.O, [self.O(2), self.O([1, 1])])


    def test_canonical_form(self):
        P = self.P
        self.assertEqual(P.hnf, ((2, 0), (1, 1)))
        self.assertEqual(P.denominator, 1)
        self.assertEqual(str(P), '(2, x + 1)')

        # Different generators, same ideal
        Q = Ideal.from_elements(self.O, [self.O(2), self.O([-1, 1]), self.O(6)])
        self.assertEqual(P, Q)
        self.assertEqual(hash(P), hash(Q))


    def test_norm_and_minimum(self):
        self.assertEqual(self.P.norm(), 2)
        self.assertEqual(self.P.minimum(), 2)
        self.assertEqual(Ideal.principal(self.O, self.O([1, 1])).norm(), 6)
        self.assertEqual(Ideal.unit(self.O).norm(), 1)


    def test_membership(self):
        self.assertIn(self.O([3, 1]), self.P)
        self.assertNotIn(self.O([1, 0]), self.P)
        self.assertIn(2, self.P)
        self.assertTrue(self.P.is_closed())


    def test_multiplication(self):
        two = Ideal.principal(self.O, self.O(2))
        self.assertEqual(self.P * self.P, two)
        self.assertEqual(self.P ** 2, two)
        self.assertEqual((self.P * self.O(3)).norm(), 18)
        self.assertEqual(self.P ** 0, Ideal.unit(self.O))


    def test_multiplication_laws(self):
        P, O = self.P, self.O
        Q    = Ideal.from_elements(O, [O(3), O([1, 1])])
        R    = Ideal.from_elements(O, [O(3), O([-1, 1])])

        self.assertEqual(P * Q, Q * P)
        self.assertEqual((P * Q) * R, P * (Q * R))
        self.assertEqual(Ideal.unit(O) * Q, Q)
        self.assertEqual((P * Q).norm(), P.norm() * Q.norm())
        self.assertEqual(Q * R, Ideal.principal(O, O(3)))


    def test_sum(self):
        A = Ideal.principal(self.O, self.O(2))
        B = Ideal.principal(self.O, self.O([1, 1]))
        self.assertEqual(A + B, self.P)
        self.assertTrue(self.P.divides(A))
        self.assertTrue(self.P.contains_ideal(B))
        self.assertFalse(A.contains_ideal(self.P))


    def test_sum_of_fractional_ideals(self):
        O    = self.O
        Pinv = self.P.inverse()
        self.assertEqual(Pinv + Ideal.unit(O), Pinv)
        self.assertEqual(Pinv + self.P, Pinv)
        self.assertEqual((Pinv + Pinv).denominator, 2)


    def test_inverse(self):
        P    = self.P
        Pinv = P.inverse()
        half = Ideal.principal(self.O, self.O([Fraction(1, 2), 0]))

        self.assertEqual(P * Pinv, Ideal.unit(self.O))
        self.assertEqual(Pinv, P * half)
        self.assertEqual(~P, Pinv)
        self.assertEqual(P ** -1, Pinv)
        self.assertFalse(Pinv.is_integral())
        self.assertEqual(Pinv.norm(), Fraction(1, 2))


    def test_division(self):
        two = Ideal.principal(self.O, self.O(2))
        self.assertEqual(two / self.P, self.P)


    def test_not_invertible(self):
        # (2, 2i) is not invertible in the non-maximal order Z[2i]
        O = Order(X**2 + 4)
        I = Ideal.from_elements(O, [O(2), O([0, 1])])
        self.assertEqual(I.norm(), 2)

        with self.assertRaises(NotInvertibleException):
            I.inverse()


    def test_zero_ideal(self):
        with self.assertRaises(ValueError):
            Ideal.principal(self.O, self.O(0))


    def test_ideal_in_non_power_basis(self):
        O = maximal_order(X**2 + 23)
        I = Ideal.principal(O, O(2))
        self.assertEqual(I.norm(), 4)
        self.assertEqual(I * I.inverse(), Ideal.unit(O))



class PrimeIdealTestCase(unittest.TestCase):
    def test_valuation(self):
        O = Order(X**2 + 1)
        P = PrimeIdeal(O, [[5, 0], [0, 5], [2, 1], [-1, 2]], 5, 1, 1)
        self.assertEqual(P.norm(), 5)
        self.assertEqual(P.valuation(O([2, 1])), 1)
        self.assertEqual(P.valuation(O([2, 1])**3), 3)
        self.assertEqual(P.valuation(O([2, -1])), 0)
        self.assertEqual(P.valuation(O(25)), 2)
        self.assertEqual(P.ideal_valuation(Ideal.principal(O, O(10))), 1)
        self.assertEqual(P.power(2), P * P)


    def test_valuation_of_zero(self):
        O = Order(X**2 + 1)
        P = PrimeIdeal(O, [[5, 0], [2, 1]], 5, 1, 1)
        with self.assertRaises(ValueError):
            P.valuation(O(0))


    def test_degree_check(self):
        O = Order(X**2 + 1)
        with self.assertRaises(InvariantViolationException):
            PrimeIdeal(O, [[3, 0], [0, 3]], 3, 1, 3)
