from dedekind.utilities.exceptions import NoSolutionException, NotInvertibleException
from fractions import Fraction


def _simplify(q):
    q = Fraction(q)
    return q.numerator if q.denominator == 1 else q


def identity(n: int) -> list:
    return [[int(i == j) for j in range(n)] for i in range(n)]


def transpose(M: list) -> list:
    return [list(col) for col in zip(*M)]


def mat_mul(A: list, B: list) -> list:
    Bt = transpose(B)
    return [[sum(a*b for a, b in zip(row, col)) for col in Bt] for row in A]


def vec_mat(v: list, M: list) -> list:
    """
    Row vector times matrix.
    """
    if not M:
        return []

    result = [0] * len(M[0])
    for x, row in zip(v, M):
        if x:
            for j, y in enumerate(row):
                result[j] += x*y

    return result


def trace(M: list):
    return sum(M[i][i] for i in range(len(M)))


def determinant(M: list):
    """
    Determinant by fraction-free (Bareiss) elimination. Integer input stays integral throughout.

    Examples:
        >>> determinant([[2, 1], [1, 3]])
        5

    """
    n = len(M)
    if not n:
        return 1

    A    = [[Fraction(x) for x in row] for row in M]
    sign = 1
    prev = Fraction(1)

    for k in range(n-1):
        if not A[k][k]:
            swap = next((i for i in range(k+1, n) if A[i][k]), None)
            if swap is None:
                return 0

            A[k], A[swap] = A[swap], A[k]
            sign = -sign

        for i in range(k+1, n):
            for j in range(k+1, n):
                A[i][j] = (A[i][j]*A[k][k] - A[i][k]*A[k][j]) / prev

        prev = A[k][k]

    return _simplify(sign * A[n-1][n-1])


def inverse(M: list) -> list:
    """
    Inverse over the rationals by Gauss-Jordan elimination.
    """
    n = len(M)
    A = [[Fraction(x) for x in row] + [Fraction(int(i == j)) for j in range(n)] for i, row in enumerate(M)]

    for c in range(n):
        piv = next((i for i in range(c, n) if A[i][c]), None)
        if piv is None:
            raise NotInvertibleException("Matrix is singular", parameters={'column': c})

        A[c], A[piv] = A[piv], A[c]
        inv  = 1 / A[c][c]
        A[c] = [x*inv for x in A[c]]

        for i in range(n):
            if i != c and A[i][c]:
                f    = A[i][c]
                A[i] = [x - f*y for x, y in zip(A[i], A[c])]

    return [[_simplify(x) for x in row[n:]] for row in A]


def solve_left(M: list, w: list) -> list:
    """
    Solves `x*M = w` for a square non-singular `M` over the rationals.
    """
    try:
        return vec_mat(w, inverse(M))
    except NotInvertibleException as e:
        raise NoSolutionException("Singular system", parameters=e.parameters)


def solve_left_lower(B: list, w: list) -> list:
    """
    Solves `c*B = w` where row `i` of `B` vanishes beyond column `i` and has a non-zero diagonal.

    Parameters:
        B (list): Lower triangular square matrix.
        w (list): Right-hand side.

    Returns:
        list: Rational solution `c`.
    """
    n = len(B)
    c = [Fraction(0)] * n

    for j in reversed(range(n)):
        acc = Fraction(w[j])
        for i in range(j+1, n):
            acc -= c[i] * B[i][j]

        c[j] = acc / B[j][j]

    return [_simplify(x) for x in c]


def charpoly(M: list) -> list:
    """
    Characteristic polynomial `det(x*I - M)` by the Faddeev-LeVerrier recursion.

    Returns:
        list: Ascending coefficients; the last one is 1.

    Examples:
        >>> charpoly([[0, 1], [-2, 0]])
        [2, 0, 1]

    """
    n      = len(M)
    coeffs = [Fraction(0)] * (n+1)
    coeffs[n] = Fraction(1)
    Mk     = [[Fraction(0)] * n for _ in range(n)]

    for k in range(1, n+1):
        Mk = mat_mul(M, Mk)
        for i in range(n):
            Mk[i][i] += coeffs[n-k+1]

        coeffs[n-k] = -Fraction(trace(mat_mul(M, Mk)), k)

    return [_simplify(c) for c in coeffs]


def rank(M: list) -> int:
    A = [[Fraction(x) for x in row] for row in M]
    if not A:
        return 0

    r = 0
    for c in range(len(A[0])):
        piv = next((i for i in range(r, len(A)) if A[i][c]), None)
        if piv is None:
            continue

        A[r], A[piv] = A[piv], A[r]
        for i in range(r+1, len(A)):
            if A[i][c]:
                f    = A[i][c] / A[r][c]
                A[i] = [x - f*y for x, y in zip(A[i], A[r])]

        r += 1
        if r == len(A):
            break

    return r
