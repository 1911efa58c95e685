from dedekind.core.base_object import BaseObject
from dedekind.math.matrix import solve_left_lower
from dedekind.utilities.exceptions import InvariantViolationException
from fractions import Fraction
import logging

log = logging.getLogger(__name__)


def poly_mulmod(a: list, b: list, f: list) -> list:
    """
    Product of two power-basis coordinate vectors modulo the monic polynomial `f`.

    Parameters:
        a (list): Coordinates of the first element (length `n`).
        b (list): Coordinates of the second element (length `n`).
        f (list): Ascending coefficients of the monic modulus (length `n+1`).

    Returns:
        list: Coordinates of `a*b mod f` (length `n`).
    """
    n    = len(f) - 1
    prod = [0] * (2*n - 1)
    for i, x in enumerate(a):
        if x:
            for j, y in enumerate(b):
                if y:
                    prod[i+j] += x*y

    for k in range(2*n - 2, n-1, -1):
        c = prod[k]
        if c:
            for i in range(n):
                prod[k-n+i] -= c*f[i]

    return prod[:n]


class MultiplicationTable(BaseObject):
    """
    Structure constants of an order's basis: `w_i * w_j = sum_k table[i][j][k] * w_k`. Built once
    per order and shared, read-only, by every element and ideal operation on that order.

    Examples:
        >>> from dedekind.math.polynomial import Polynomial
        >>> from dedekind.math.algebra.rings.order import Order
        >>> T = Order(Polynomial([1, 0, 1])).multiplication_table
        >>> T.multiply([2, 3], [4, 1])
        [5, 14]

    """

    def __init__(self, order: 'Order'):
        n      = order.degree
        f      = order.polynomial.integer_coefficients()
        basis  = order.power_basis_rows()
        H, d   = order.hnf, order.denominator
        table  = [[None]*n for _ in range(n)]

        for i in range(n):
            for j in range(i, n):
                prod   = poly_mulmod(basis[i], basis[j], f)
                coords = solve_left_lower(H, [x*d for x in prod])

                if any(Fraction(c).denominator != 1 for c in coords):
                    raise InvariantViolationException("Basis is not closed under multiplication", parameters={'i': i, 'j': j, 'coords': coords})

                table[i][j] = table[j][i] = tuple(int(c) for c in coords)

        self.degree = n
        self.table  = tuple(tuple(row) for row in table)
        log.debug(f"Built {n}x{n}x{n} multiplication table")


    def __reprdir__(self):
        return ['degree', 'table']


    def __getitem__(self, idx: tuple) -> tuple:
        i, j = idx
        return self.table[i][j]


    def multiply(self, x: list, y: list, modulus: int=None) -> list:
        """
        Product of two elements given by their coordinates.

        Parameters:
            x       (list): Coordinates of the first factor.
            y       (list): Coordinates of the second factor.
            modulus  (int): Reduce the result modulo this integer.

        Returns:
            list: Coordinates of `x*y`.
        """
        n      = self.degree
        result = [0] * n
        for i, a in enumerate(x):
            if not a:
                continue

            row = self.table[i]
            for j, b in enumerate(y):
                if not b:
                    continue

                ab = a*b
                for k, c in enumerate(row[j]):
                    if c:
                        result[k] += ab*c

        if modulus:
            result = [r % modulus for r in result]

        return result


    def power(self, x: list, e: int, one: list, modulus: int=None) -> list:
        result = list(one)
        base   = list(x)
        while e:
            if e & 1:
                result = self.multiply(result, base, modulus)
            base = self.multiply(base, base, modulus)
            e >>= 1

        return result


    def left_matrix(self, x: list) -> list:
        """
        Regular representation: row `k` holds the coordinates of `x * w_k`.
        """
        n = self.degree
        return [self.multiply(x, [int(i == k) for i in range(n)]) for k in range(n)]


    def trace(self, x: list):
        M = self.left_matrix(x)
        return sum(M[i][i] for i in range(self.degree))
