from dedekind.math.algebra.fields.number_field import NumberField
from dedekind.math.algebra.ideals.class_group import ClassGroup, analytic_class_number, class_group, is_fundamental_discriminant, minkowski_bound
from dedekind.math.algebra.rings.order import Order, maximal_order
from dedekind.math.general import product
from dedekind.math.polynomial import Polynomial, X
from dedekind.utilities.exceptions import RelationSearchExhaustedException
from fractions import Fraction
import unittest


class MinkowskiBoundTestCase(unittest.TestCase):
    def test_bound(self):
        self.assertIsInstance(minkowski_bound(2, 1, -20), Fraction)
        self.assertTrue(Fraction(28, 10) < minkowski_bound(2, 1, -20) < 3)
        self.assertTrue(minkowski_bound(3, 1, -23) < 2)
        self.assertTrue(Fraction(316, 100) < minkowski_bound(2, 0, 40) < Fraction(317, 100))



class AnalyticClassNumberTestCase(unittest.TestCase):
    def test_fundamental(self):
        self.assertTrue(is_fundamental_discriminant(-20308))
        self.assertTrue(is_fundamental_discriminant(-26635))
        self.assertTrue(is_fundamental_discriminant(-20))
        self.assertFalse(is_fundamental_discriminant(-16))
        self.assertFalse(is_fundamental_discriminant(-27))


    def test_class_numbers(self):
        self.assertEqual([analytic_class_number(D) for D in [-3, -4, -7, -8, -15, -20, -23, -84]], [1, 1, 1, 1, 2, 2, 3, 4])
        self.assertEqual(analytic_class_number(-26635), 20)
        self.assertEqual(analytic_class_number(-19960), 44)
        self.assertEqual(analytic_class_number(-20308), 22)


    def test_non_fundamental(self):
        with self.assertRaises(ValueError):
            analytic_class_number(-16)

        with self.assertRaises(ValueError):
            analytic_class_number(5)



class ClassGroupTestCase(unittest.TestCase):
    def test_trivial(self):
        cl = class_group(Order(Polynomial([-1, -1, 0, 1])), 1)
        self.assertTrue(cl.is_trivial())
        self.assertEqual(str(cl), 'C1')
        self.assertEqual(cl.invariants, [])


    def test_gaussian_integers(self):
        self.assertEqual(class_group(Order(X**2 + 1), 1).class_number, 1)


    def test_imaginary_quadratic(self):
        cl = class_group(Order(X**2 + 5), 1)
        self.assertEqual(cl.class_number, 2)
        self.assertEqual(cl.invariants, [2])
        self.assertEqual(str(cl), 'C2')


    def test_real_quadratic(self):
        cl = class_group(Order(X**2 - 10), 0)
        self.assertEqual(cl.class_number, 2)


    def test_order_larger_than_equation_order(self):
        # O_K is larger than Z[x] at 2
        cl = class_group(maximal_order(X**2 + 23), 1)
        self.assertEqual(cl.class_number, 3)
        self.assertEqual(str(cl), 'C3')


    def test_large_factor_base(self):
        # Minkowski bounds near 100, factor bases of a dozen or more primes
        for coeffs, D, h in [([6659, 1, 1], -26635, 20), ([4990, 0, 1], -19960, 44), ([5077, 0, 1], -20308, 22)]:
            K = NumberField(coeffs)
            self.assertEqual(K.discriminant(), D)
            self.assertGreater(len(K.class_group().factor_base), 8)
            self.assertEqual(K.class_number(), h)
            self.assertEqual(product(K.class_group().invariants), h)


    def test_structure_str(self):
        self.assertEqual(str(ClassGroup([2, 4], [], 0, Fraction(1))), 'C2 x C4')
        self.assertEqual(ClassGroup([2, 4], [], 0, Fraction(1)).class_number, 8)


    def test_exhausted(self):
        # Two batches cannot show three unchanged class numbers
        with self.assertRaises(RelationSearchExhaustedException):
            class_group(Order(X**2 - 10), 0, max_batches=1, stable_rounds=3)
