from dedekind.math.algebra.fields.prime_field import PrimeField
from dedekind.math.general import kth_root, primes
from dedekind.math.polynomial import Polynomial
from dedekind.utilities.exceptions import InvalidPolynomialException
from itertools import combinations
import logging

log = logging.getLogger(__name__)

# Number of admissible primes compared before lifting
PRIME_CANDIDATES = 5


def _symmetric(coeffs: list, m: int) -> list:
    half   = m // 2
    result = [c % m for c in coeffs]
    result = [c - m if c > half else c for c in result]
    while result and not result[-1]:
        result.pop()

    return result


def _int_mul(a: list, b: list) -> list:
    if not a or not b:
        return []

    result = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        for j, y in enumerate(b):
            result[i+j] += x*y

    return result


def _hensel_step(f: list, g: list, h: list, p: int, k: int) -> tuple:
    """
    Lifts `f = lc(f)*g*h mod p` (`g`, `h` monic and coprime mod `p`) to a factorization mod `p^k`.
    """
    F       = PrimeField(p)
    lc_inv  = F.inv(f[-1])
    _, s, t = F.xgcd(g, h)
    m       = p

    for _ in range(k-1):
        prod = _int_mul(_int_mul([f[-1]], g), h)
        e    = [(a - (prod[i] if i < len(prod) else 0)) // m for i, a in enumerate(f)]
        e    = F.scale(F.poly(e), lc_inv)

        dg = F.mod(F.mul(t, e), g)
        dh = F.mod(F.mul(s, e), h)

        g  = [a + m*(dg[i] if i < len(dg) else 0) for i, a in enumerate(g)]
        h  = [a + m*(dh[i] if i < len(dh) else 0) for i, a in enumerate(h)]
        m *= p

    return g, h


def hensel_lift(f: list, factors: list, p: int, k: int) -> list:
    """
    Lifts the factorization `f = lc(f) * prod(factors) mod p` into monic factors mod `p^k`.

    Parameters:
        f       (list): Integer coefficients, ascending.
        factors (list): Monic, pairwise coprime factors of `f` mod `p`.
        p        (int): Prime not dividing `lc(f)`.
        k        (int): Target exponent.

    Returns:
        list: Monic integer factors, coefficients in `[0, p^k)`.
    """
    F  = PrimeField(p)
    pk = p**k

    if len(factors) == 1:
        lc_inv = pow(f[-1], -1, pk)
        return [[c*lc_inv % pk for c in f]]

    g = factors[0]
    h = [1]
    for fac in factors[1:]:
        h = F.mul(h, fac)

    G, H = _hensel_step(f, g, h, p, k)
    G    = [c % pk for c in G]
    H    = [c % pk for c in H]
    return [G] + hensel_lift(H, factors[1:], p, k)


def _choose_prime(f: list) -> tuple:
    best  = None
    tried = 0
    for p in primes(3):
        if not f[-1] % p:
            continue

        F  = PrimeField(p)
        fp = F.poly(f)
        if len(F.gcd(fp, F.derivative(fp))) > 1:
            continue

        facs = [g for g, _ in F.factor(fp)]
        if best is None or len(facs) < len(best[1]):
            best = (p, facs)

        tried += 1
        if tried >= PRIME_CANDIDATES or len(facs) == 1:
            break

    return best


def _factor_squarefree(f: Polynomial) -> list:
    """
    Zassenhaus factorization of a primitive square-free integer polynomial with positive leading coefficient.

    References:
        von zur Gathen, Gerhard, "Modern Computer Algebra", Algorithm 15.19.
    """
    coeffs = f.integer_coefficients()
    n      = f.degree()
    if n <= 1:
        return [f]

    p, facs = _choose_prime(coeffs)
    log.debug(f"Zassenhaus: {f} splits into {len(facs)} factors mod {p}")
    if len(facs) == 1:
        return [f]

    norm = kth_root(sum(c*c for c in coeffs), 2) + 1
    B    = 2**n * norm * abs(coeffs[-1])
    k    = 1
    while p**k <= 2*B:
        k += 1

    pk     = p**k
    lifted = hensel_lift(coeffs, facs, p, k)

    result = []
    rest   = f
    T      = list(range(len(lifted)))
    s      = 1

    while 2*s <= len(T):
        for S in combinations(T, s):
            lc = rest.integer_coefficients()[-1]
            g  = [lc]
            for i in S:
                g = _int_mul(g, lifted[i])

            g = Polynomial(_symmetric(g, pk)).primitive_part()
            q, r = divmod(rest, g)
            if not r and q.is_integral():
                result.append(g)
                rest = q
                T    = [i for i in T if i not in S]
                break
        else:
            s += 1

    result.append(rest)
    return result


def _squarefree_over_rationals(f: Polynomial) -> list:
    """
    Yun's square-free decomposition; the parts are primitive with positive leading coefficient.
    """
    result = []
    a      = f.primitive_part()
    c      = a.gcd(a.derivative())
    w      = a / c
    i      = 1

    while w.degree() > 0:
        y = w.gcd(c)
        z = w / y
        if z.degree() > 0:
            result.append((z.primitive_part(), i))

        i += 1
        w  = y
        c  = c / y

    return result


def factor_over_integers(f: Polynomial) -> list:
    """
    Factors a non-constant polynomial into irreducible primitive integer polynomials, ignoring the content.

    Parameters:
        f (Polynomial): Polynomial with rational coefficients.

    Returns:
        list: Pairs `(g, e)` with `g` primitive, positive leading coefficient, sorted by degree.

    Examples:
        >>> factor_over_integers(Polynomial([-1, 0, 0, 0, 1]))
        [(<Polynomial: x - 1>, 1), (<Polynomial: x + 1>, 1), (<Polynomial: x^2 + 1>, 1)]

    """
    if f.degree() < 1:
        raise InvalidPolynomialException(f"Cannot factor the constant {f}", parameters={'degree': f.degree()})

    result = []
    for part, e in _squarefree_over_rationals(f):
        if part.LC() < 0:
            part = -part

        for g in _factor_squarefree(part):
            if g.LC() < 0:
                g = -g

            result.append((g, e))

    return sorted(result, key=lambda ge: (ge[0].degree(), [abs(c) for c in reversed(ge[0].coeffs)], ge[0].coeffs, ge[1]))


def is_irreducible_over_integers(f: Polynomial) -> bool:
    if f.degree() < 1:
        return False

    facs = factor_over_integers(f)
    return len(facs) == 1 and facs[0][1] == 1
