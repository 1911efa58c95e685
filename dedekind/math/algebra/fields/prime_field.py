from dedekind.core.base_object import BaseObject
from dedekind.math.general import is_prime
import random


def _strip(coeffs: list) -> list:
    while coeffs and not coeffs[-1]:
        coeffs.pop()
    return coeffs


class PrimeField(BaseObject):
    """
    The finite field F_p. Polynomials over F_p are plain lists of integers in `[0, p)`, ascending
    by power, without trailing zeros (the zero polynomial is `[]`). Vectors are lists of the same length.

    Examples:
        >>> F = PrimeField(5)
        >>> F.factor([1, 0, 1])
        [([2, 1], 1), ([3, 1], 1)]

        >>> F.is_irreducible([2, 0, 1])
        True

    """

    def __init__(self, p: int):
        """
        Parameters:
            p (int): Prime characteristic.
        """
        if not is_prime(p):
            raise ValueError(f"{p} is not prime")

        self.p = p


    def __reprdir__(self):
        return ['p']


    def __hash__(self) -> int:
        return hash((self.__class__, self.p))


    def shorthand(self) -> str:
        return f'F_{self.p}'


    def characteristic(self) -> int:
        return self.p


    def order(self) -> int:
        return self.p


    def inv(self, a: int) -> int:
        return pow(a % self.p, -1, self.p)


    # Polynomial arithmetic

    def poly(self, coeffs) -> list:
        p = self.p
        return _strip([int(c) % p for c in coeffs])


    def add(self, a: list, b: list) -> list:
        n = max(len(a), len(b))
        return _strip([((a[i] if i < len(a) else 0) + (b[i] if i < len(b) else 0)) % self.p for i in range(n)])


    def sub(self, a: list, b: list) -> list:
        n = max(len(a), len(b))
        return _strip([((a[i] if i < len(a) else 0) - (b[i] if i < len(b) else 0)) % self.p for i in range(n)])


    def scale(self, a: list, c: int) -> list:
        return _strip([x*c % self.p for x in a])


    def mul(self, a: list, b: list) -> list:
        if not a or not b:
            return []

        p      = self.p
        result = [0] * (len(a) + len(b) - 1)
        for i, x in enumerate(a):
            if x:
                for j, y in enumerate(b):
                    result[i+j] += x*y

        return _strip([c % p for c in result])


    def divmod(self, a: list, b: list) -> tuple:
        if not b:
            raise ZeroDivisionError("Polynomial division by zero")

        p   = self.p
        r   = list(a)
        db  = len(b) - 1
        inv = self.inv(b[-1])
        q   = [0] * max(len(r) - db, 0)

        while len(r) - 1 >= db and r:
            shift    = len(r) - 1 - db
            c        = r[-1] * inv % p
            q[shift] = c

            for i, y in enumerate(b):
                r[shift+i] = (r[shift+i] - c*y) % p

            _strip(r)

        return _strip(q), r


    def mod(self, a: list, b: list) -> list:
        return self.divmod(a, b)[1]


    def monic(self, a: list) -> list:
        if not a:
            return a

        return self.scale(a, self.inv(a[-1]))


    def derivative(self, a: list) -> list:
        return _strip([i*c % self.p for i, c in enumerate(a)][1:])


    def gcd(self, a: list, b: list) -> list:
        while b:
            a, b = b, self.mod(a, b)

        return self.monic(a)


    def xgcd(self, a: list, b: list) -> tuple:
        """
        Returns `(g, s, t)` with `g` monic and `s*a + t*b == g`.
        """
        old_r, r = a, b
        old_s, s = [1], []
        old_t, t = [], [1]

        while r:
            q, rem   = self.divmod(old_r, r)
            old_r, r = r, rem
            old_s, s = s, self.sub(old_s, self.mul(q, s))
            old_t, t = t, self.sub(old_t, self.mul(q, t))

        if not old_r:
            return [], [], []

        inv = self.inv(old_r[-1])
        return self.scale(old_r, inv), self.scale(old_s, inv), self.scale(old_t, inv)


    def pow_mod(self, a: list, e: int, m: list) -> list:
        result = self.mod([1], m)
        base   = self.mod(a, m)
        while e:
            if e & 1:
                result = self.mod(self.mul(result, base), m)
            base = self.mod(self.mul(base, base), m)
            e >>= 1

        return result


    def evaluate(self, a: list, x: int) -> int:
        result = 0
        for c in reversed(a):
            result = (result*x + c) % self.p

        return result


    # Factorization

    def squarefree_factorization(self, f: list) -> list:
        """
        Square-free decomposition of a non-constant polynomial.

        Returns:
            list: Pairs `(A, e)` of monic square-free, pairwise coprime polynomials with `f ~ prod A^e`.

        References:
            Cohen, "A Course in Computational Algebraic Number Theory", Algorithm 3.4.2.
        """
        p      = self.p
        result = []
        e      = 1
        T0     = self.monic(self.poly(f))

        while len(T0) > 1:
            T = self.gcd(T0, self.derivative(T0))
            V = self.divmod(T0, T)[0]
            k = 0

            while len(V) > 1:
                k += 1
                W  = self.gcd(T, V)
                A  = self.divmod(V, W)[0]
                V  = W
                T  = self.divmod(T, V)[0]

                if len(A) > 1:
                    result.append((A, e*k))

            # What is left is a p-th power
            T0 = [T[i] for i in range(0, len(T), p)]
            e *= p

        return result


    def distinct_degree_factorization(self, f: list) -> list:
        """
        Splits a monic square-free polynomial into products of irreducibles of equal degree.

        Returns:
            list: Pairs `(A_d, d)`, `A_d` the product of the irreducible factors of degree `d`.
        """
        x      = [0, 1]
        v      = self.monic(f)
        w      = x
        d      = 0
        result = []

        while 2*(d+1) <= len(v) - 1:
            d += 1
            w  = self.pow_mod(w, self.p, v)
            g  = self.gcd(self.sub(w, x), v)

            if len(g) > 1:
                result.append((g, d))
                v = self.divmod(v, g)[0]
                w = self.mod(w, v)

        if len(v) > 1:
            result.append((v, len(v) - 1))

        return result


    def equal_degree_factorization(self, f: list, d: int, rng: random.Random=None) -> list:
        """
        Cantor-Zassenhaus splitting of a monic product of distinct irreducibles of degree `d`.
        """
        n = len(f) - 1
        if n == d:
            return [f]

        rng = rng or random.Random(hash((self.p, tuple(f))))

        while True:
            a = _strip([rng.randrange(self.p) for _ in range(n)])
            if len(a) < 2:
                continue

            g = self.gcd(a, f)
            if 1 < len(g) < len(f):
                break

            if self.p == 2:
                b = a
                t = a
                for _ in range(d-1):
                    t = self.mod(self.mul(t, t), f)
                    b = self.add(b, t)
            else:
                b = self.sub(self.pow_mod(a, (self.p**d - 1) // 2, f), [1])

            g = self.gcd(b, f)
            if 1 < len(g) < len(f):
                break

        h = self.divmod(f, g)[0]
        return self.equal_degree_factorization(g, d, rng) + self.equal_degree_factorization(self.monic(h), d, rng)


    def factor(self, f: list) -> list:
        """
        Factors a non-constant polynomial into monic irreducibles.

        Parameters:
            f (list): Polynomial.

        Returns:
            list: Pairs `(g, e)` sorted by degree, then coefficients.
        """
        f = self.poly(f)
        if len(f) < 2:
            raise ValueError("Cannot factor a constant polynomial")

        result = []
        for A, e in self.squarefree_factorization(f):
            for A_d, d in self.distinct_degree_factorization(A):
                for g in self.equal_degree_factorization(A_d, d):
                    result.append((g, e))

        return sorted(result, key=lambda ge: (len(ge[0]), ge[0][::-1], ge[1]))


    def is_irreducible(self, f: list) -> bool:
        f = self.monic(self.poly(f))
        if len(f) < 2:
            return False

        if len(self.gcd(f, self.derivative(f))) > 1:
            return False

        ddf = self.distinct_degree_factorization(f)
        return len(ddf) == 1 and ddf[0][1] == len(f) - 1


    # Linear algebra over F_p

    def row_echelon(self, rows: list) -> tuple:
        """
        Reduced row echelon form.

        Returns:
            tuple: (non-zero rows of the RREF, list of pivot columns).
        """
        p    = self.p
        rows = [[x % p for x in row] for row in rows]
        if not rows:
            return [], []

        n      = len(rows[0])
        r      = 0
        pivots = []

        for c in range(n):
            piv = next((i for i in range(r, len(rows)) if rows[i][c]), None)
            if piv is None:
                continue

            rows[r], rows[piv] = rows[piv], rows[r]
            inv     = self.inv(rows[r][c])
            rows[r] = [x*inv % p for x in rows[r]]

            for i in range(len(rows)):
                if i != r and rows[i][c]:
                    f       = rows[i][c]
                    rows[i] = [(x - f*y) % p for x, y in zip(rows[i], rows[r])]

            pivots.append(c)
            r += 1
            if r == len(rows):
                break

        return rows[:r], pivots


    def rank(self, rows: list) -> int:
        return len(self.row_echelon(rows)[1])


    def left_kernel(self, rows: list) -> list:
        """
        Basis of `{x : x*M = 0}` where `M` has the given rows.

        Examples:
            >>> PrimeField(3).left_kernel([[1, 2], [2, 1], [0, 0]])
            [[1, 1, 0], [0, 0, 1]]

        """
        m = len(rows)
        if not m:
            return []

        n   = len(rows[0])
        aug = [list(row) + [int(i == j) for j in range(m)] for i, row in enumerate(rows)]
        red, pivots = self.row_echelon(aug)

        # Rows of the augmented echelon form whose left block vanishes span the kernel
        full_rank = sum(1 for c in pivots if c < n)
        kernel    = [row[n:] for row in red[full_rank:]]
        return kernel


    def reduce_vector(self, v: list, echelon: tuple) -> list:
        """
        Reduces `v` modulo the row space given by `row_echelon` output.
        """
        p         = self.p
        v         = [x % p for x in v]
        red, pivs = echelon
        for row, c in zip(red, pivs):
            if v[c]:
                f = v[c]
                v = [(x - f*y) % p for x, y in zip(v, row)]

        return v
