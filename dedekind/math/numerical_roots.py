from dedekind.math.polynomial import Polynomial
import logging

log = logging.getLogger(__name__)


def durand_kerner(f: Polynomial, max_iterations: int=1000, tolerance: float=1e-14) -> list:
    """
    Approximates all complex roots of `f` simultaneously with the Weierstrass (Durand-Kerner) iteration.
    Floating point; for display only.

    Parameters:
        f          (Polynomial): Polynomial of degree at least one.
        max_iterations    (int): Iteration cap.
        tolerance       (float): Stop once every correction is below this.

    Returns:
        list: `complex` roots, with multiplicity.

    References:
        https://en.wikipedia.org/wiki/Durand%E2%80%93Kerner_method
    """
    n = f.degree()
    if n < 1:
        return []

    lc     = float(f.LC())
    coeffs = [float(c) / lc for c in f.coeffs]

    def evaluate(z):
        result = 0j
        for c in reversed(coeffs):
            result = result*z + c
        return result

    radius = 1 + max(abs(c) for c in coeffs[:-1])
    roots  = [radius * complex(0.4, 0.9)**k for k in range(n)]

    for it in range(max_iterations):
        delta = 0.0
        for i in range(n):
            denom = 1+0j
            for j in range(n):
                if i != j:
                    denom *= roots[i] - roots[j]

            if denom == 0:
                denom = complex(tolerance, tolerance)

            step      = evaluate(roots[i]) / denom
            roots[i] -= step
            delta     = max(delta, abs(step))

        if delta < tolerance:
            log.debug(f"Durand-Kerner converged after {it+1} iterations")
            break

    return roots


def embeddings(f: Polynomial, r1: int=None) -> tuple:
    """
    Splits the approximate roots of `f` into real roots and one representative (positive
    imaginary part) of each complex-conjugate pair.

    Parameters:
        f (Polynomial): Square-free polynomial.
        r1       (int): Exact number of real roots (from Sturm); estimated when omitted.

    Returns:
        tuple: (sorted real roots as `float`, complex roots with positive imaginary part).
    """
    roots = sorted(durand_kerner(f), key=lambda z: abs(z.imag))
    if r1 is None:
        r1 = f.count_real_roots()

    real  = sorted(z.real for z in roots[:r1])
    upper = sorted((z for z in roots[r1:] if z.imag > 0), key=lambda z: (z.real, z.imag))
    return real, upper
