from dedekind.math.general import gcd, lcm, product, xgcd
from fractions import Fraction



def _insert(basis: dict, v: list) -> bool:
    """
    Adds the row `v` to the echelon basis `{pivot column: row}` with unimodular two-row steps.
    Returns whether the basis changed.
    """
    changed = False
    for c in range(len(v)):
        if not v[c]:
            continue

        R = basis.get(c)
        if R is None:
            basis[c] = v if v[c] > 0 else [-x for x in v]
            return True

        if not v[c] % R[c]:
            q = v[c] // R[c]
            v = [a - q*b for a, b in zip(v, R)]
            continue

        g, x, y  = xgcd(R[c], v[c])
        u, w     = R[c] // g, v[c] // g
        basis[c] = [x*a + y*b for a, b in zip(R, v)]
        v        = [w*a - u*b for a, b in zip(R, v)]
        changed  = True

    return changed


def _reduce(basis: dict):
    """
    Reduces every entry above a pivot into `[0, pivot)`, pivot columns left to right.
    """
    pivots = sorted(basis)
    for j in pivots:
        P = basis[j]
        for i in pivots:
            if i >= j:
                break

            q = basis[i][j] // P[j]
            if q:
                basis[i] = [a - q*b for a, b in zip(basis[i], P)]


def hermite_normal_form_mod(rows: list, D: int) -> list:
    """
    Hermite normal form of a full-rank lattice, given a positive multiple `D` of its determinant.

    Column `c` is eliminated with every entry reduced modulo `R_c = D / (h_0 * ... * h_(c-1))`, which
    is valid because the part of the lattice still to be processed contains `R_c * Z^(n-c)`. No
    intermediate entry ever exceeds `D`.

    Parameters:
        rows (list): Integer generators of a lattice of rank equal to the row length.
        D     (int): Positive multiple of the lattice determinant.

    Returns:
        list: The square HNF basis.

    Examples:
        >>> hermite_normal_form_mod([[2, 4, 4], [-6, 6, 12], [10, 4, 16]], 624)
        [[2, 0, 120], [0, 2, 20], [0, 0, 156]]

    References:
        Domich, Kannan, Trotter, "Hermite normal form computation using modulo determinant arithmetic" (1987).
        Cohen, "A Course in Computational Algebraic Number Theory", Algorithm 2.4.8.
    """
    n = len(rows[0])
    A = [list(row) for row in rows]
    W = []
    R = D

    for c in range(n):
        w    = None
        rest = []

        for row in A:
            row = [x % R for x in row]
            if not row[c]:
                if any(row):
                    rest.append(row)
                continue

            if w is None:
                w = row
                continue

            g, x, y = xgcd(w[c], row[c])
            u, v    = w[c] // g, row[c] // g
            w, row  = [(x*a + y*b) % R for a, b in zip(w, row)], [(v*a - u*b) % R for a, b in zip(w, row)]
            if any(row):
                rest.append(row)

        if w is None:
            w = [0]*n

        d, s, _ = xgcd(w[c], R)
        W.append([0]*c + [d] + [(s*x) % R for x in w[c+1:]])

        R //= d
        A   = rest

    basis = dict(enumerate(W))
    _reduce(basis)
    return [basis[c] for c in range(n)]


def hermite_normal_form(rows: list) -> list:
    """
    Row-style Hermite normal form of the lattice spanned by `rows`.

    The result is the canonical basis of the lattice: the first non-zero entry (pivot) of each
    row lies strictly right of the previous row's pivot, every pivot is positive, and every entry
    above a pivot lies in `[0, pivot)`. Only unimodular row operations built from the extended
    Euclidean algorithm are used, so no fractions appear. Zero rows are dropped, so a rank-deficient
    input yields fewer rows than columns.

    Rows are inserted one at a time into a reduced echelon basis until it has full rank; the rest
    are then processed modulo the determinant of that basis, so entries stay bounded however many
    generators are given.

    Parameters:
        rows (list): Integer generators of the lattice (all of the same length).

    Returns:
        list: The HNF basis; `[]` for the zero lattice.

    Examples:
        >>> hermite_normal_form([[2, 4, 4], [-6, 6, 12], [10, 4, 16]])
        [[2, 0, 120], [0, 2, 20], [0, 0, 156]]

        >>> hermite_normal_form([[0, 0], [0, 0]])
        []

    References:
        Kannan, Bachem, "Polynomial algorithms for computing the Smith and Hermite normal forms of an integer matrix" (1979).
    """
    A = [[int(x) for x in row] for row in rows if any(row)]
    if not A:
        return []

    n     = len(A[0])
    basis = {}
    idx   = 0

    while idx < len(A) and len(basis) < n:
        if _insert(basis, A[idx]):
            _reduce(basis)
        idx += 1

    H = [basis[c] for c in sorted(basis)]
    if len(basis) < n or idx == len(A):
        return H

    D = product(H[c][c] for c in range(n))
    return hermite_normal_form_mod(H + A[idx:], D)


def hermite_normal_form_lower(rows: list) -> list:
    """
    Mirror image of `hermite_normal_form`: row `i` ends at its pivot, pivots move left to right going
    down, and every entry below a pivot is reduced into `[0, pivot)`. For a full-rank lattice the
    result is lower triangular with a positive diagonal, and row 0 generates the intersection of the
    lattice with the first coordinate axis.

    Examples:
        >>> hermite_normal_form_lower([[1, 0], [0, 2], [1, 1]])
        [[1, 0], [0, 1]]

        >>> hermite_normal_form_lower([[4, 2], [0, 6]])
        [[12, 0], [4, 2]]

    """
    flipped = hermite_normal_form([list(reversed(row)) for row in rows])
    return [list(reversed(row)) for row in reversed(flipped)]


def lattice_sum(A: list, B: list) -> list:
    """
    Canonical (lower) basis of the smallest lattice containing both `A` and `B`.
    """
    return hermite_normal_form_lower(list(A) + list(B))


def integer_left_kernel(M: list) -> list:
    """
    Basis (in HNF) of the integer solutions of `x*M = 0`.

    Parameters:
        M (list): `m x n` integer matrix.

    Returns:
        list: Rows spanning `{x in Z^m : x*M = 0}`.

    Examples:
        >>> integer_left_kernel([[1, 2], [2, 4], [0, 1]])
        [[2, -1, 0]]

    """
    m = len(M)
    if not m:
        return []

    n   = len(M[0])
    aug = [list(row) + [int(i == j) for j in range(m)] for i, row in enumerate(M)]
    H   = hermite_normal_form(aug)
    return [row[n:] for row in H if not any(row[:n])]


def integer_left_kernel_mod(M: list, modulus: int) -> list:
    """
    Basis of the integer solutions of `x*M = 0 mod modulus` (a full-rank lattice).
    """
    m = len(M)
    n = len(M[0]) if m else 0

    aug  = [list(row) + [int(i == j) for j in range(m)] for i, row in enumerate(M)]
    aug += [[modulus*int(i == j) for j in range(n)] + [0]*m for i in range(n)]
    H    = hermite_normal_form(aug)
    return hermite_normal_form_lower([row[n:] for row in H if not any(row[:n])])


def rational_hnf(rows: list) -> tuple:
    """
    Lower HNF of a lattice given by rational generators.

    Returns:
        tuple: (`H`, `d`) with `H` integral and the lattice equal to `H / d`, `d` as small as possible.
    """
    rows = [[Fraction(x) for x in row] for row in rows]
    d    = lcm(*[x.denominator for row in rows for x in row]) if rows else 1
    H    = hermite_normal_form_lower([[int(x*d) for x in row] for row in rows])

    g = gcd(*[x for row in H for x in row], d)
    if g > 1:
        H = [[x // g for x in row] for row in H]
        d //= g

    return H, d
