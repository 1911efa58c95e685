from dedekind.math.general import gcd, product, xgcd
from dedekind.math.hnf import hermite_normal_form


def _swap_cols(A: list, i: int, j: int):
    for row in A:
        row[i], row[j] = row[j], row[i]


def _divisor_chain(diag: list) -> list:
    """
    Rewrites a diagonal `diag(d_1, ..., d_r)` as an equivalent one with `d_1 | d_2 | ... | d_r`
    by replacing pairs with their gcd and lcm.
    """
    d = list(diag)
    for i in range(len(d)):
        for j in range(i+1, len(d)):
            g = gcd(d[i], d[j])
            if g:
                d[i], d[j] = g, d[i]*d[j] // g

    return d


def _smith_mod(H: list, D: int) -> list:
    """
    Diagonal of a square full-rank matrix modulo a multiple `D` of its determinant. Row and column
    operations are unimodular and every entry is kept in `[0, D)`; each pivot contributes `gcd(pivot, D)`.
    """
    n = len(H)
    A = [[x % D for x in row] for row in H]
    diag = []

    for t in range(n):
        while True:
            for i in range(t+1, n):
                if not A[i][t]:
                    continue

                g, x, y = xgcd(A[t][t], A[i][t])
                u, v    = A[t][t] // g, A[i][t] // g
                A[t], A[i] = [(x*a + y*b) % D for a, b in zip(A[t], A[i])], [(v*a - u*b) % D for a, b in zip(A[t], A[i])]

            for j in range(t+1, n):
                if not A[t][j]:
                    continue

                g, x, y = xgcd(A[t][t], A[t][j])
                u, v    = A[t][t] // g, A[t][j] // g
                for row in A:
                    row[t], row[j] = (x*row[t] + y*row[j]) % D, (v*row[t] - u*row[j]) % D

            if not any(A[i][t] for i in range(t+1, n)):
                break

        diag.append(gcd(A[t][t], D))

    return _divisor_chain(diag)


def _smith_euclid(A: list) -> list:
    rows, cols = len(A), len(A[0])
    diag       = []

    for t in range(min(rows, cols)):
        entries = [(abs(A[i][j]), i, j) for i in range(t, rows) for j in range(t, cols) if A[i][j]]
        if not entries:
            break

        _, i, j = min(entries)
        A[t], A[i] = A[i], A[t]
        _swap_cols(A, t, j)

        while True:
            reduced = True
            p       = A[t][t]

            for i in range(t+1, rows):
                q = A[i][t] // p
                if q:
                    A[i] = [x - q*y for x, y in zip(A[i], A[t])]

                if A[i][t]:
                    reduced = False

            for j in range(t+1, cols):
                q = A[t][j] // p
                if q:
                    for row in A:
                        row[j] -= q*row[t]

                if A[t][j]:
                    reduced = False

            if not reduced:
                # A smaller remainder sits in row or column t; make it the pivot
                cands   = [(abs(A[i][t]), i, t) for i in range(t, rows) if A[i][t]]
                cands  += [(abs(A[t][j]), t, j) for j in range(t, cols) if A[t][j]]
                _, i, j = min(cands)
                A[t], A[i] = A[i], A[t]
                _swap_cols(A, t, j)
                continue

            bad = next((i for i in range(t+1, rows) for j in range(t+1, cols) if A[i][j] % p), None)
            if bad is None:
                break

            A[t] = [x + y for x, y in zip(A[t], A[bad])]

        diag.append(abs(A[t][t]))

    return diag


def smith_normal_form(M: list) -> list:
    """
    Diagonal of the Smith normal form of an integer matrix.

    The rows are first brought to Hermite normal form, which discards dependent rows and bounds the
    entries. A full-rank result is diagonalized modulo its determinant; otherwise alternating row and
    column eliminations clear each pivot's row and column until every remaining entry is a multiple
    of the pivot.

    Parameters:
        M (list): Integer matrix, one relation per row.

    Returns:
        list: Positive invariant factors `d_1 | d_2 | ... | d_r`, `r` the rank of `M`.

    Examples:
        >>> smith_normal_form([[2, 4, 4], [-6, 6, 12], [10, 4, 16]])
        [2, 2, 156]

        >>> smith_normal_form([[6, 0], [0, 4]])
        [2, 12]

    References:
        Cohen, "A Course in Computational Algebraic Number Theory", Algorithm 2.4.14.
    """
    A = [list(row) for row in hermite_normal_form(M)]
    if not A:
        return []

    if len(A) == len(A[0]):
        return _smith_mod(A, product(A[i][i] for i in range(len(A))))

    return _smith_euclid(A)


def invariant_factors(M: list) -> list:
    """
    The non-trivial invariant factors (those greater than one) of the group `Z^n / <rows of M>`,
    assuming `M` has full column rank.
    """
    return [d for d in smith_normal_form(M) if d > 1]
