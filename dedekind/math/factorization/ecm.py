from dedekind.math.general import gcd, kth_root, random_int_between, sieve_of_eratosthenes
from dedekind.utilities.exceptions import FactorizationUnavailableException
from tqdm import tqdm
import logging
import math

log = logging.getLogger(__name__)


def compute_bounds(log_n: float) -> tuple:
    """
    Stage 1 and stage 2 smoothness bounds for a factor of `log_n` bits.
    Generic ECM bounds (10^15, 10^20, ...) converted to log2.
    """
    if log_n <= 50:
        B1, B2 = 2000, 147396
    elif log_n <= 67:
        B1, B2 = 11000, 1873422
    elif log_n <= 83:
        B1, B2 = 50000, 12746592
    elif log_n <= 100:
        B1, B2 = 250000, 128992510
    else:
        raise FactorizationUnavailableException("Integer too large for ECM implementation", parameters={'log_n': log_n})

    return B1, B2



def point_add(px, pz, qx, qz, rx, rz, n):
    """
    Montgomery x-only differential addition: P + Q given P - Q = R.
    """
    u = (px-pz) * (qx+qz)
    v = (px+pz) * (qx-qz)
    upv, umv = u+v, u-v

    x = rz * upv * upv
    z = rx * umv * umv
    return x % n, z % n


def point_double(px, pz, n, a24):
    u, v   = px+pz, px-pz
    u2, v2 = u*u, v*v

    t = u2 - v2
    x = u2 * v2
    z = t * (v2 + a24*t)
    return x % n, z % n


def scalar_multiply(k, px, pz, n, a24):
    sk     = bin(k)[3:]
    qx, qz = px, pz
    rx, rz = point_double(px, pz, n, a24)

    for b in sk:
        if b == '1':
            qx, qz = point_add(rx, rz, qx, qz, px, pz, n)
            rx, rz = point_double(rx, rz, n, a24)
        else:
            rx, rz = point_add(qx, qz, rx, rz, px, pz, n)
            qx, qz = point_double(qx, qz, n, a24)

    return qx, qz


_SIEVE_CACHE = {}
_K_CACHE     = {}


def _prime_base(B2: int) -> list:
    if B2 not in _SIEVE_CACHE:
        _SIEVE_CACHE[B2] = sieve_of_eratosthenes(B2)

    return _SIEVE_CACHE[B2]


def _stage_one_exponent(B1: int, prime_base: list) -> tuple:
    if B1 not in _K_CACHE:
        k = 1
        l = 0
        for p in prime_base:
            if p > B1:
                break

            l += 1
            k *= p**int(math.log(B1, p))

        _K_CACHE[B1] = k, l

    return _K_CACHE[B1]


def ecm(n: int, max_curves: int=200, target_size: float=None, visual: bool=False) -> int:
    """
    Uses Lenstra's Elliptic Curve Method (Montgomery curves, Suyama parametrization)
    to find a non-trivial factor of the composite `n`.

    Parameters:
        n           (int): Composite integer to factor.
        max_curves  (int): Maximum number of curves to attempt.
        target_size (int): Size of factor to target in bits (defaults to half of total bitlength).
        visual     (bool): Whether or not to show progress bar.

    Returns:
        int: Non-trivial factor of `n`.

    Examples:
        >>> from dedekind.math.factorization.ecm import ecm
        >>> ecm(1000000016000000063) in (1000000007, 1000000009)
        True

    References:
        https://github.com/nishanth17/factor
    """
    target_size = target_size or math.log2(n)/2
    B1, B2      = compute_bounds(target_size)
    prime_base  = _prime_base(B2)
    k, l        = _stage_one_exponent(B1, prime_base)

    def R(a):
        return a % n

    D    = kth_root(B2, 2)
    S    = [0] * (2*(D+1))
    beta = [0] * (D+1)

    iterator = range(max_curves)

    if visual:
        iterator = tqdm(iterator, unit='curve', desc=f"ECM ({math.ceil(target_size)}-bit target)")

    try:
        for curve in iterator:
            # Random curve in Suyama's family
            sigma = random_int_between(6, n-1)
            u     = R(sigma*sigma - 5)
            v     = R(4*sigma)
            denom = R(16 * u**3 * v)
            g     = gcd(denom, n)

            if 1 < g < n:
                return g
            elif g == n:
                continue

            A24 = R(pow(v-u, 3, n) * (3*u+v) * pow(denom, -1, n))

            # Stage 1
            px, pz = R(u**3), R(v**3)
            qx, qz = scalar_multiply(k, px, pz, n, A24)

            g = gcd(qz, n)

            if 1 < g < n:
                return g
            elif g == n:
                continue


            # Stage 2
            S[1], S[2] = point_double(qx, qz, n, A24)
            S[3], S[4] = point_double(S[1], S[2], n, A24)
            beta[1]    = R(S[1] * S[2])
            beta[2]    = R(S[3] * S[4])

            for d in range(3, D+1):
                d2 = 2 * d
                S[d2-1], S[d2] = point_add(S[d2-3], S[d2-2], S[1], S[2], S[d2-5], S[d2-4], n)
                beta[d] = R(S[d2-1] * S[d2])

            g, B = 1, B1 - 1

            rx, rz  = scalar_multiply(B, qx, qz, n, A24)
            tx, tz  = scalar_multiply(B - 2*D, qx, qz, n, A24)
            q, step = l, 2*D

            for r in range(B, B2, step):
                alpha, limit = rx * rz, r + step
                while q < len(prime_base) and prime_base[q] <= limit:
                    d  = (prime_base[q] - r) // 2
                    f  = (rx - S[2*d-1]) * (rz + S[2*d]) - alpha + beta[d]
                    g  = R(g*f)
                    q += 1

                trx, trz = rx, rz
                rx, rz   = point_add(rx, rz, S[2*D-1], S[2*D], tx, tz, n)
                tx, tz   = trx, trz

            g = gcd(n, g)

            if 1 < g < n:
                log.debug(f"ECM found {g} on curve {curve}")
                return g

    finally:
        if visual:
            iterator.close()

    raise FactorizationUnavailableException("Factor not found", parameters={'n': n, 'max_curves': max_curves})
