from dedekind.math.polynomial import Polynomial, X
from dedekind.math.numerical_roots import durand_kerner, embeddings
from dedekind.utilities.exceptions import InvalidPolynomialException
from fractions import Fraction
import unittest


class PolynomialTestCase(unittest.TestCase):
    def test_str(self):
        self.assertEqual(str(Polynomial([-1, -1, 0, 1])), 'x^3 - x - 1')
        self.assertEqual(str(Polynomial([3, -2, 1, 2])), '2*x^3 + x^2 - 2*x + 3')
        self.assertEqual(str(Polynomial([Fraction(1, 2), Fraction(1, 2)])), '1/2*x + 1/2')
        self.assertEqual(str(Polynomial()), '0')


    def test_coefficient_order(self):
        self.assertEqual(Polynomial.from_descending([1, 0, -5]), Polynomial([-5, 0, 1]))
        self.assertEqual(X**2 - 5, Polynomial([-5, 0, 1]))
        self.assertEqual(Polynomial([1, 2, 0, 0]).degree(), 1)


    def test_arithmetic(self):
        f = X**3 - 1
        g = X - 1
        self.assertEqual(f / g, X**2 + X + 1)
        self.assertEqual(f % (X**2), Polynomial([-1]))
        self.assertEqual((X + 2)*(X - 3), X**2 - X - 6)

        with self.assertRaises(ArithmeticError):
            f / (X + 2)


    def test_gcd_and_squarefree(self):
        a = (X - 1)*(X + 2)
        b = (X - 1)*(X + 3)*2
        self.assertEqual(a.gcd(b), X - 1)
        self.assertTrue(a.is_squarefree())
        self.assertFalse(((X - 1)**2).is_squarefree())


    def test_discriminant(self):
        self.assertEqual(Polynomial([-1, -1, 0, 1]).discriminant(), -23)
        self.assertEqual(Polynomial([3, -2, 1, 2]).discriminant(), -1132)
        self.assertEqual(Polynomial([1, 9, 0, 1]).discriminant(), -2943)
        self.assertEqual(Polynomial([4, 3, 2, 1]).discriminant(), -200)
        self.assertEqual(Polynomial([3, 2]).discriminant(), 1)
        self.assertEqual(Polynomial([37, 2, 1]).discriminant(), -144)


    def test_discriminant_of_constant(self):
        with self.assertRaises(InvalidPolynomialException):
            Polynomial([5]).discriminant()


    def test_resultant(self):
        f = Polynomial([5, 0, 2, 0, 6, 9])
        g = Polynomial([6, 6, 6, 1, 7])
        self.assertEqual(f.resultant(g), 335159672)
        self.assertEqual((X**2 + 1).resultant(X - 1), 2)
        self.assertEqual(((X - 1)*(X - 2)).resultant((X - 1)*(X + 3)), 0)
        self.assertEqual((X**3 + X).resultant(Polynomial([3])), 27)


    def test_count_real_roots(self):
        self.assertEqual((X**2 - 2).count_real_roots(), 2)
        self.assertEqual(Polynomial([-1, -1, 0, 1]).count_real_roots(), 1)
        self.assertEqual((X**2 + 1).count_real_roots(), 0)
        self.assertEqual(((X - 1)*(X - 2)*(X - 3)*(X**2 + 5)).count_real_roots(), 3)


    def test_numerical_roots(self):
        roots = sorted(durand_kerner(X**2 - 2), key=lambda z: z.real)
        self.assertAlmostEqual(roots[0].real, -2**0.5, places=9)
        self.assertAlmostEqual(roots[1].real, 2**0.5, places=9)

        real, cplx = embeddings(Polynomial([-1, -1, 0, 1]))
        self.assertEqual(len(real), 1)
        self.assertEqual(len(cplx), 1)
        self.assertAlmostEqual(real[0], 1.324717957244746, places=9)
        self.assertAlmostEqual(cplx[0].real, -0.662358978622373, places=9)
        self.assertGreater(cplx[0].imag, 0)
