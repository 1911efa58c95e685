from dedekind.math.algebra.fields.number_field import NumberField
from dedekind.math.polynomial import Polynomial, X
from dedekind.utilities.exceptions import InvalidPolynomialException
from fractions import Fraction
import unittest


class NumberFieldTestCase(unittest.TestCase):
    def test_cubic(self):
        K = NumberField([-1, -1, 0, 1])
        self.assertEqual(K.degree(), 3)
        self.assertEqual(K.polynomial_discriminant(), -23)
        self.assertEqual(K.discriminant(), -23)
        self.assertEqual(K.signature(), (1, 1))
        self.assertEqual(K.index(), 1)
        self.assertEqual(K.class_number(), 1)
        self.assertEqual(K.integral_basis(), [Polynomial([1]), X, X**2])


    def test_validation(self):
        bad = [
            Polynomial([3, -2, 1, 2]),
            Polynomial([5]),
            X**2 - 1,
            (X - 1)**2,
            X**2 + Fraction(1, 2),
        ]

        for f in bad:
            with self.assertRaises(InvalidPolynomialException):
                NumberField(f)


    def test_not_monic_message(self):
        with self.assertRaises(InvalidPolynomialException) as ctx:
            NumberField(Polynomial([3, -2, 1, 2]))

        self.assertIn('not monic', str(ctx.exception))


    def test_index_and_basis(self):
        K = NumberField(X**2 + 2*X + 37)
        self.assertEqual(K.polynomial_discriminant(), -144)
        self.assertEqual(K.discriminant(), -4)
        self.assertEqual(K.index(), 6)
        self.assertEqual(K.signature(), (0, 1))

        K = NumberField(X**2 + 23)
        self.assertEqual(K.integral_basis(), [Polynomial([1]), Polynomial([Fraction(1, 2), Fraction(1, 2)])])


    def test_class_group(self):
        K = NumberField(X**2 + 5)
        self.assertEqual(K.class_number(), 2)
        self.assertEqual(str(K.class_group()), 'C2')
        self.assertTrue(K.minkowski_bound() < 3)


    def test_ideals(self):
        K = NumberField(X**2 + 5)
        P = K.ideal(2, X + 1)
        self.assertEqual(P.norm(), 2)
        self.assertEqual(P * P, K.ideal(2))
        self.assertEqual(K.ideal([1, 1]), K.ideal(X + 1))

        # Generators are reduced modulo the defining polynomial
        self.assertEqual(K.ideal(X**2), K.ideal(5))


    def test_prime_decomposition(self):
        K = NumberField(X**2 + 1)
        self.assertEqual([(P.e, P.f) for P in K.prime_decomposition(2)], [(2, 1)])
        self.assertEqual([(P.e, P.f) for P in K.prime_decomposition(3)], [(1, 2)])
        self.assertEqual([(P.e, P.f) for P in K.prime_decomposition(5)], [(1, 1), (1, 1)])


    def test_factor_ideal(self):
        K       = NumberField(X**2 + 5)
        factors = K.factor_ideal(K.ideal(X + 1))
        self.assertEqual(sorted((P.norm(), k) for P, k in factors), [(2, 1), (3, 1)])
        self.assertEqual(factors[0][0] * factors[1][0], K.ideal(X + 1))


    def test_embeddings(self):
        real, cplx = NumberField(X**2 - 2).embeddings()
        self.assertEqual(len(real), 2)
        self.assertEqual(cplx, [])
        self.assertAlmostEqual(real[1], 2**0.5, places=9)


    def test_equality(self):
        self.assertEqual(NumberField([1, 0, 1]), NumberField(X**2 + 1))
        self.assertNotEqual(NumberField([1, 0, 1]), NumberField([2, 0, 1]))
