from fractions import Fraction


def _dot(u: list, v: list, gram: list=None):
    if gram is None:
        return sum(a*b for a, b in zip(u, v))

    return sum(a*gram[i][j]*b for i, a in enumerate(u) if a for j, b in enumerate(v) if b)


def _gram_schmidt(B: list, gram: list) -> tuple:
    n      = len(B)
    B_star = []
    mu     = [[Fraction(0)] * n for _ in range(n)]
    norms  = []

    for i in range(n):
        v = [Fraction(x) for x in B[i]]
        for j in range(i):
            mu[i][j] = _dot(B[i], B_star[j], gram) / norms[j] if norms[j] else Fraction(0)
            v        = [a - mu[i][j]*b for a, b in zip(v, B_star[j])]

        B_star.append(v)
        norms.append(_dot(v, v, gram))

    return mu, norms


def lll_reduce(basis: list, delta: Fraction=Fraction(3, 4), gram: list=None) -> list:
    """
    Exact LLL reduction of a lattice basis. All Gram-Schmidt data are kept as fractions.

    Parameters:
        basis    (list): Linearly independent integer rows.
        delta (Fraction): Lovasz constant in `(1/4, 1]`.
        gram     (list): Optional positive definite Gram matrix; the standard inner product otherwise.

    Returns:
        list: Reduced basis of the same lattice.

    Examples:
        >>> lll_reduce([[1, 1, 1], [-1, 0, 2], [3, 5, 6]])
        [[0, 1, 0], [1, 0, 1], [-1, 0, 2]]

    """
    B = [list(row) for row in basis]
    n = len(B)
    if n < 2:
        return B

    mu, norms = _gram_schmidt(B, gram)
    k         = 1

    while k < n:
        for j in reversed(range(k)):
            if abs(mu[k][j]) > Fraction(1, 2):
                q    = round(mu[k][j])
                B[k] = [a - q*b for a, b in zip(B[k], B[j])]

                for l in range(j):
                    mu[k][l] -= q*mu[j][l]

                mu[k][j] -= q

        if norms[k] >= (delta - mu[k][k-1]**2) * norms[k-1]:
            k += 1
        else:
            B[k], B[k-1] = B[k-1], B[k]
            mu, norms    = _gram_schmidt(B, gram)
            k            = max(k-1, 1)

    return B
