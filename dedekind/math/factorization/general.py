from dedekind.math.factorization.factors import Factors
from dedekind.math.factorization.ecm import ecm
from dedekind.math.general import gcd, is_prime, kth_root, random_int_between, sieve_of_eratosthenes
from dedekind.utilities.exceptions import FactorizationUnavailableException
import logging

log = logging.getLogger(__name__)

TRIAL_DIVISION_BOUND = 10000
RHO_ITERATIONS       = 200000

_SMALL_PRIMES = sieve_of_eratosthenes(TRIAL_DIVISION_BOUND)


def trial_division(n: int, limit: int=TRIAL_DIVISION_BOUND) -> tuple:
    """
    Strips the prime factors up to `limit` from `n`.

    Parameters:
        n     (int): Positive integer.
        limit (int): Largest prime tried.

    Returns:
        tuple: (`Factors` found, remaining cofactor).

    Examples:
        >>> trial_division(2**5 * 3 * 1000003)
        (<Factors: factors={2: 5, 3: 1}>, 1000003)

    """
    facs   = {}
    primes = _SMALL_PRIMES if limit <= TRIAL_DIVISION_BOUND else sieve_of_eratosthenes(limit)

    for p in primes:
        if p > limit or p*p > n:
            break

        while not n % p:
            facs[p] = facs.get(p, 0) + 1
            n //= p

    return Factors(facs), n


def pollard_rho(n: int, iterations: int=RHO_ITERATIONS) -> int:
    """
    Brent's variant of Pollard's rho. Returns a non-trivial factor of the composite `n`
    or None when the iteration budget is spent.

    References:
        https://maths-people.anu.edu.au/~brent/pd/rpb051i.pdf
    """
    if not n % 2:
        return 2

    for _ in range(8):
        y, c, m = random_int_between(1, n), random_int_between(1, n), 128
        g, r, q = 1, 1, 1
        x = ys = y
        spent = 0

        while g == 1 and spent < iterations:
            x = y
            for _ in range(r):
                y = (y*y + c) % n

            k = 0
            while k < r and g == 1:
                ys = y
                for _ in range(min(m, r-k)):
                    y = (y*y + c) % n
                    q = q * abs(x-y) % n

                g = gcd(q, n)
                k += m

            spent += r
            r *= 2

        if g == n:
            g = 1
            while g == 1:
                ys = (ys*ys + c) % n
                g  = gcd(abs(x-ys), n)

        if 1 < g < n:
            return g

    return None


def _perfect_power(n: int) -> tuple:
    for k in range(n.bit_length(), 1, -1):
        r = kth_root(n, k)
        if r > 1 and r**k == n:
            return r, k

    return n, 1


def _split(n: int, visual: bool, max_curves: int) -> int:
    d = pollard_rho(n)
    if d:
        return d

    log.debug(f"Pollard rho failed on {n}; falling back to ECM")
    return ecm(n, max_curves=max_curves, visual=visual)


def factor(n: int, visual: bool=False, max_curves: int=200) -> Factors:
    """
    Complete prime factorization of `n`. Signs are ignored. This is the oracle used to find
    the primes that may divide an order index.

    Parameters:
        n          (int): Non-zero integer to factor.
        visual    (bool): Whether or not to show ECM progress bars.
        max_curves (int): Effort bound handed to ECM.

    Returns:
        Factors: Prime factorization of `|n|`; empty for 1.

    Examples:
        >>> factor(-1132)
        <Factors: factors={2: 2, 283: 1}>

        >>> factor(36355439941184).recombine() == 36355439941184
        True

    """
    n = abs(int(n))
    if not n:
        raise ValueError("Cannot factor zero")

    facs, n = trial_division(n)
    stack   = [n] if n > 1 else []

    while stack:
        m = stack.pop()

        if is_prime(m):
            facs.add(m)
            continue

        root, k = _perfect_power(m)
        if k > 1:
            stack.extend([root]*k)
            continue

        try:
            d = _split(m, visual, max_curves)
        except FactorizationUnavailableException as e:
            raise FactorizationUnavailableException(f"Could not factor {m} within the effort bound", parameters={'n': m, **e.parameters})

        stack.extend([d, m // d])

    return facs
