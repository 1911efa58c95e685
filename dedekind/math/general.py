from dedekind.utilities.exceptions import NotInvertibleException
from functools import reduce
import math
import random

_rand = random.SystemRandom()

# Deterministic Miller-Rabin witnesses for n < 3.3 * 10^24
_MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
_MR_DETERMINISTIC_BOUND = 3317044064679887385961981


def gcd(*args) -> int:
    """
    Greatest common divisor of any number of integers. `gcd()` is 0.

    Examples:
        >>> gcd(12, 18, -8)
        2

    """
    return reduce(math.gcd, args, 0)


def lcm(*args) -> int:
    """
    Least common multiple of any number of integers. `lcm()` is 1.

    Examples:
        >>> lcm(4, 6, 10)
        60

    """
    result = 1
    for a in args:
        a = abs(a)
        if not a:
            return 0
        result = result * a // math.gcd(result, a)

    return result


def xgcd(a: int, b: int) -> tuple:
    """
    Extended Euclidean algorithm.

    Parameters:
        a (int): First integer.
        b (int): Second integer.

    Returns:
        tuple: `(g, x, y)` with `g = gcd(a, b) >= 0` and `g == a*x + b*y`.

    Examples:
        >>> xgcd(240, 46)
        (2, -9, 47)

    """
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1

    while r:
        q = old_r // r
        old_r, r = r, old_r - q*r
        old_s, s = s, old_s - q*s
        old_t, t = t, old_t - q*t

    if old_r < 0:
        old_r, old_s, old_t = -old_r, -old_s, -old_t

    return old_r, old_s, old_t


def mod_inv(a: int, n: int) -> int:
    """
    Modular inverse of `a` modulo `n`.

    Parameters:
        a (int): Integer to invert.
        n (int): Modulus.

    Returns:
        int: `x` in `[0, n)` with `a*x = 1 (mod n)`.
    """
    g, x, _ = xgcd(a % n, n)
    if g != 1:
        raise NotInvertibleException(f"{a} is not invertible modulo {n}", parameters={'a': a, 'n': n, 'gcd': g})

    return x % n


def product(elems, start: int=1):
    result = start
    for elem in elems:
        result = result * elem

    return result


def kth_root(n: int, k: int) -> int:
    """
    Largest integer `r` with `r**k <= n`.

    Examples:
        >>> kth_root(1000, 3)
        10

        >>> kth_root(999, 3)
        9

    """
    if n < 0:
        raise ValueError("`n` must be non-negative")

    if k == 2:
        return math.isqrt(n)

    if n < 2:
        return n

    r = 1 << ((n.bit_length() + k - 1) // k)
    while True:
        s = ((k-1)*r + n // r**(k-1)) // k
        if s >= r:
            break
        r = s

    while r**k > n:
        r -= 1

    while (r+1)**k <= n:
        r += 1

    return r


def is_square(n: int) -> bool:
    return n >= 0 and math.isqrt(n)**2 == n


def is_power_of(n: int, p: int) -> bool:
    if n < 1:
        return False

    while n % p == 0:
        n //= p

    return n == 1


def valuation(n: int, p: int) -> int:
    """
    Largest `e` such that `p**e` divides the non-zero integer `n`.
    """
    if not n:
        raise ValueError("The valuation of zero is infinite")

    e = 0
    while n % p == 0:
        n //= p
        e += 1

    return e


def kronecker(a: int, n: int) -> int:
    """
    Kronecker symbol `(a/n)`, extending the Jacobi symbol to every integer `n`.

    Examples:
        >>> [kronecker(-23, p) for p in [2, 3, 5, 23]]
        [1, 1, -1, 0]

        >>> kronecker(-4, 2)
        0

    References:
        Cohen, "A Course in Computational Algebraic Number Theory", Algorithm 1.4.10.
    """
    if not n:
        return int(abs(a) == 1)

    if not a % 2 and not n % 2:
        return 0

    v = 0
    while not n % 2:
        n //= 2
        v += 1

    k = 1
    if v % 2 and (a % 8) in (3, 5):
        k = -1

    if n < 0:
        n = -n
        if a < 0:
            k = -k

    # Jacobi symbol for odd positive n
    a %= n
    while a:
        while not a % 2:
            a //= 2
            if n % 8 in (3, 5):
                k = -k

        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            k = -k

        a %= n

    return k if n == 1 else 0


def random_int_between(a: int, b: int) -> int:
    """
    Uniform random integer in `[a, b)`.
    """
    return a + _rand.randrange(b - a)


def _miller_rabin(n: int, a: int, d: int, s: int) -> bool:
    x = pow(a, d, n)
    if x in (1, n-1):
        return True

    for _ in range(s-1):
        x = x*x % n
        if x == n-1:
            return True

    return False


def is_prime(n: int, rounds: int=32) -> bool:
    """
    Miller-Rabin primality test. Deterministic below 3.3 * 10^24, probabilistic with
    `rounds` random witnesses above.

    Parameters:
        n      (int): Integer to test.
        rounds (int): Random witnesses for large `n`.

    Returns:
        bool: Whether `n` is (probably) prime.

    Examples:
        >>> is_prime(2**61 - 1)
        True

        >>> is_prime(561)
        False

    """
    if n < 2:
        return False

    for p in _MR_BASES:
        if n % p == 0:
            return n == p

    d, s = n-1, 0
    while not d % 2:
        d //= 2
        s += 1

    if n < _MR_DETERMINISTIC_BOUND:
        bases = _MR_BASES
    else:
        bases = [random_int_between(2, n-1) for _ in range(rounds)]

    return all(_miller_rabin(n, a, d, s) for a in bases)


def next_prime(n: int) -> int:
    """
    Smallest prime greater than or equal to `n`.
    """
    n = max(n, 2)
    while not is_prime(n):
        n += 1

    return n


def sieve_of_eratosthenes(n: int) -> list:
    """
    All primes less than or equal to `n`.

    Examples:
        >>> sieve_of_eratosthenes(20)
        [2, 3, 5, 7, 11, 13, 17, 19]

    """
    if n < 2:
        return []

    sieve = bytearray([1]) * (n+1)
    sieve[0] = sieve[1] = 0

    for i in range(2, math.isqrt(n)+1):
        if sieve[i]:
            sieve[i*i::i] = bytearray(len(range(i*i, n+1, i)))

    return [i for i, is_p in enumerate(sieve) if is_p]


def primes(start: int=2, stop: int=None):
    """
    Lazily yields the primes in `[start, stop]` (unbounded when `stop` is None).
    """
    p = next_prime(start)
    while stop is None or p <= stop:
        yield p
        p = next_prime(p+1)
