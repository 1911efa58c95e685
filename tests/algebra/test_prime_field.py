from dedekind.math.algebra.fields.prime_field import PrimeField
import unittest


class PrimeFieldTestCase(unittest.TestCase):
    def test_not_prime(self):
        with self.assertRaises(ValueError):
            PrimeField(15)


    def test_arithmetic(self):
        F    = PrimeField(7)
        q, r = F.divmod([1, 0, 0, 1], [1, 1])
        self.assertEqual(F.add(F.mul(q, [1, 1]), r), [1, 0, 0, 1])
        self.assertEqual(F.monic([2, 4]), [4, 1])
        self.assertEqual(F.evaluate([1, 2, 3], 2), (1 + 4 + 12) % 7)


    def test_xgcd(self):
        F       = PrimeField(7)
        a, b    = [1, 0, 1], [3, 1]
        g, s, t = F.xgcd(a, b)
        self.assertEqual(g, [1])
        self.assertEqual(F.add(F.mul(s, a), F.mul(t, b)), [1])


    def test_factor(self):
        self.assertEqual(PrimeField(5).factor([1, 0, 1]), [([2, 1], 1), ([3, 1], 1)])
        self.assertEqual(PrimeField(3).factor([1, 0, 1]), [([1, 0, 1], 1)])
        self.assertEqual(PrimeField(2).factor([1, 0, 1]), [([1, 1], 2)])
        self.assertEqual(PrimeField(3).factor([1, 0, 0, 1]), [([1, 1], 3)])
        self.assertEqual(PrimeField(2).factor([0, 1, 0, 0, 1]), [([0, 1], 1), ([1, 1], 1), ([1, 1, 1], 1)])


    def test_factor_recombines(self):
        F = PrimeField(13)
        f = [5, 3, 0, 7, 1, 0, 2, 1]
        prod = [1]
        for g, e in F.factor(f):
            self.assertTrue(F.is_irreducible(g))
            for _ in range(e):
                prod = F.mul(prod, g)

        self.assertEqual(prod, F.monic(F.poly(f)))


    def test_is_irreducible(self):
        self.assertTrue(PrimeField(5).is_irreducible([2, 0, 1]))
        self.assertTrue(PrimeField(2).is_irreducible([1, 1, 1]))
        self.assertFalse(PrimeField(2).is_irreducible([1, 0, 1]))
        self.assertFalse(PrimeField(5).is_irreducible([4]))


    def test_linear_algebra(self):
        F = PrimeField(3)
        self.assertEqual(F.left_kernel([[1, 2], [2, 1], [0, 0]]), [[1, 1, 0], [0, 0, 1]])
        self.assertEqual(F.rank([[1, 2], [2, 1]]), 1)

        echelon = F.row_echelon([[1, 1, 0]])
        self.assertEqual(F.reduce_vector([2, 2, 1], echelon), [0, 0, 1])
