from dedekind.math.algebra.rings.order import Order, maximal_order
from dedekind.math.algebra.rings.multiplication_table import MultiplicationTable, poly_mulmod
from dedekind.math.matrix import determinant
from dedekind.math.polynomial import Polynomial, X
from dedekind.utilities.exceptions import InvalidPolynomialException, InvariantViolationException, NonConvergentOrderException
from fractions import Fraction
from unittest.mock import patch
import unittest


class OrderElementTestCase(unittest.TestCase):
    def setUp(self):
        self.O = Order(X**2 + 1)


    def test_multiplication(self):
        a = self.O([2, 3])
        b = self.O([4, 1])
        self.assertEqual((a*b).coords, (5, 14))
        self.assertEqual(self.O.multiplication_table.multiply([2, 3], [4, 1]), [5, 14])
        self.assertEqual((a**2).coords, (-5, 12))
        self.assertEqual((a + 1).coords, (3, 3))
        self.assertEqual((3 - a).coords, (1, -3))


    def test_norm_trace(self):
        a = self.O([2, 3])
        self.assertEqual(a.norm(), 13)
        self.assertEqual(a.trace(), 4)
        self.assertEqual(a.characteristic_polynomial(), X**2 - 4*X + 13)


    def test_power_basis(self):
        self.assertEqual(self.O([2, 3]).to_polynomial(), 3*X + 2)
        self.assertTrue(self.O([2, 3]).is_integral())
        self.assertFalse(self.O([Fraction(1, 2), 0]).is_integral())


    def test_poly_mulmod(self):
        # theta^2 = theta + 1 for x^3 - x - 1 gives theta^4 = theta^2 + theta
        self.assertEqual(poly_mulmod([0, 0, 1], [0, 0, 1], [-1, -1, 0, 1]), [0, 1, 1])



class OrderTestCase(unittest.TestCase):
    def test_rejects_non_monic(self):
        with self.assertRaises(InvalidPolynomialException):
            Order(Polynomial([3, -2, 1, 2]))


    def test_equation_order(self):
        O = Order(X**2 - 5)
        self.assertEqual(O.discriminant(), 20)
        self.assertEqual(O.index(), 1)
        self.assertEqual(O.denominator, 1)
        self.assertEqual(determinant(O.trace_matrix()), 20)


    def test_p_maximal(self):
        O  = Order(X**2 - 5)
        Ok = O.p_maximal(2)

        self.assertEqual(Ok.discriminant(), 5)
        self.assertEqual(Ok.index(), 2)
        self.assertEqual(Ok.index(O), 2)
        self.assertEqual(Ok.denominator, 2)
        self.assertIn([Fraction(1, 2), Fraction(1, 2)], Ok)
        self.assertNotIn([Fraction(1, 2), Fraction(1, 2)], O)
        self.assertEqual(determinant(Ok.trace_matrix()), 5)


    def test_is_p_maximal(self):
        O = Order(X**2 - 5)
        self.assertFalse(O.is_p_maximal(2))
        self.assertTrue(O.is_p_maximal(5))
        self.assertTrue(O.p_maximal(2).is_p_maximal(2))


    def test_non_convergent(self):
        with self.assertRaises(NonConvergentOrderException):
            Order(X**2 - 5).p_maximal(2, max_rounds=0)


    def test_union(self):
        O  = Order(X**2 - 5)
        Ok = O.p_maximal(2)
        self.assertEqual(O.union(Ok), Ok)
        self.assertEqual(Ok.union(O), Ok)


    def test_unit_element_is_first_basis_vector(self):
        Ok = maximal_order(X**2 + 23)
        self.assertEqual(Ok.one().to_power_basis(), [1, 0])
        self.assertEqual(Ok.basis()[1].to_power_basis(), [Fraction(1, 2), Fraction(1, 2)])


    def test_t2_gram(self):
        self.assertEqual(Order(X**2 + 1).t2_gram(), [[2, 0], [0, 2]])

        # T2(a + b*sqrt(-5077)) = 2a^2 + 2*5077*b^2
        self.assertEqual(Order(X**2 + 5077).t2_gram(), [[2, 0], [0, 10154]])


    def test_multiplication_table(self):
        Ok = maximal_order(X**2 + 23)
        T  = Ok.multiplication_table
        self.assertIsInstance(T, MultiplicationTable)

        # w = (1 + sqrt(-23))/2 satisfies w^2 = w - 6
        self.assertEqual(T[1, 1], (-6, 1))



class MaximalOrderTestCase(unittest.TestCase):
    def test_index(self):
        O = maximal_order(Polynomial([37, 2, 1]))
        self.assertEqual(O.discriminant(), -4)
        self.assertEqual(O.index(), 6)


    def test_already_maximal(self):
        O = maximal_order(Polynomial([-1, -1, 0, 1]))
        self.assertEqual(O.discriminant(), -23)
        self.assertEqual(O.index(), 1)
        self.assertEqual(O, Order(Polynomial([-1, -1, 0, 1])))


    def test_discriminants(self):
        cases = [
            ([4, 3, 2, 1], -200),
            ([5, 4, 3, 2, 1], 10800),
            ([6, 5, 4, 3, 2, 1], 1037232),
            ([7, 6, 5, 4, 3, 2, 1], -9834496),
            ([8, 7, 6, 5, 4, 3, 2, 1], -241864704),
        ]

        for coeffs, disc in cases:
            f = Polynomial(coeffs)
            O = maximal_order(f)
            self.assertEqual(O.discriminant(), disc)
            self.assertEqual(O.index()**2 * disc, f.discriminant())


    def test_cubic_with_index(self):
        # x^3 + x^2 - 2x + 8 (Dedekind's example): 2 divides every index
        O = maximal_order(Polynomial([8, -2, 1, 1]))
        self.assertEqual(O.discriminant(), -503)
        self.assertEqual(O.index(), 2)


    def test_trace_form_disagrees(self):
        # A trace form of determinant 1 contradicts disc(x^2 + 5) = -20
        with patch.object(Order, 'trace_matrix', return_value=[[1, 0], [0, 1]]):
            with self.assertRaises(InvariantViolationException):
                maximal_order(X**2 + 5)


    def test_index_disagrees(self):
        with patch.object(Order, 'index', return_value=2):
            with self.assertRaises(InvariantViolationException):
                maximal_order(X**2 + 5)
