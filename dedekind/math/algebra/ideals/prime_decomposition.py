from dedekind.math.algebra.fields.prime_field import PrimeField
from dedekind.math.algebra.ideals.ideal import Ideal, PrimeIdeal
from dedekind.math.algebra.rings.order import Order
from dedekind.math.factorization.general import factor
from dedekind.math.general import is_prime, valuation
from dedekind.math.polynomial import Polynomial
from dedekind.utilities.exceptions import InvariantViolationException, ProbabilisticFailureException
import logging
import random

log = logging.getLogger(__name__)

# Random elements tried before giving up on splitting one radical factor
SPLIT_ATTEMPTS = 64


def _sort_key(P: PrimeIdeal) -> tuple:
    return (P.f, P.e, P.hnf)


def _check_sum(order: Order, p: int, primes: list):
    total = sum(P.e*P.f for P in primes)
    if total != order.degree:
        raise InvariantViolationException(f"Sum of e*f over primes above {p} is {total}, expected {order.degree}", parameters={'p': p, 'ef': [(P.e, P.f) for P in primes]})


def kummer_dedekind(order: Order, p: int) -> list:
    """
    Decomposition of `pO` for `p` not dividing `[O : Z[theta]]`: factor `f` modulo `p` as `prod g_i^e_i`,
    then `P_i = pO + g_i(theta)O` with ramification `e_i` and residue degree `deg g_i`.

    Parameters:
        order (Order): Order whose index is prime to `p`.
        p       (int): Prime.

    Returns:
        list: `PrimeIdeal`s above `p`.
    """
    F      = PrimeField(p)
    f      = order.polynomial
    primes = []

    for g, e in F.factor(f.reduce_mod(p)):
        g_theta = (Polynomial(g) % f).coeffs
        g_theta = list(g_theta) + [0]*(order.degree - len(g_theta))
        ideal   = Ideal.from_elements(order, [order(p), order.element_from_power_basis(g_theta)])
        primes.append(PrimeIdeal.from_ideal(ideal, p, e, len(g) - 1))

    return primes


def _minimal_polynomial(order: Order, F: PrimeField, alpha: list, echelon: tuple, dim: int) -> list:
    """
    Minimal polynomial over F_p of `alpha` acting on `O/J`, from the Krylov sequence of 1.
    """
    T      = order.multiplication_table
    p      = F.p
    vecs   = [F.reduce_vector(order.one().coords, echelon)]
    power  = order.one().coords

    for k in range(1, dim+1):
        power = T.multiply(power, alpha, p)
        vecs.append(F.reduce_vector(power, echelon))

        kern = F.left_kernel(vecs)
        if kern:
            rel = kern[0]
            return F.monic(F.poly(rel))

    raise InvariantViolationException("Minimal polynomial degree exceeds the quotient dimension", parameters={'p': p, 'dim': dim})


def _evaluate(order: Order, g: list, alpha: list, p: int) -> list:
    T      = order.multiplication_table
    result = [0]*order.degree
    for c in reversed(g):
        result    = T.multiply(result, alpha, p)
        result[0] = (result[0] + c) % p

    return result


def _split(order: Order, p: int, J: Ideal, rng: random.Random) -> list:
    """
    Splits an ideal `J` with `pO` in `J` and `O/J` a product of finite fields into its prime factors.
    """
    F       = PrimeField(p)
    n       = order.degree
    dim     = valuation(J.norm(), p)
    echelon = F.row_echelon([list(row) for row in J.hnf])

    for _ in range(SPLIT_ATTEMPTS):
        alpha = [rng.randrange(p) for _ in range(n)]
        m     = _minimal_polynomial(order, F, alpha, echelon, dim)
        facs  = F.factor(m) if len(m) > 1 else []

        if any(e > 1 for _, e in facs):
            raise InvariantViolationException("Quotient by the radical is not reduced", parameters={'p': p, 'minpoly': m})

        if len(facs) == 1 and len(m) - 1 == dim:
            return [(J, dim)]

        if len(facs) > 1:
            pieces = []
            for h, _ in facs:
                h_alpha = _evaluate(order, h, alpha, p)
                J_h     = J + Ideal.from_elements(order, [order(h_alpha)])
                pieces += _split(order, p, J_h, rng)

            return pieces

    raise ProbabilisticFailureException(f"Could not split the radical above {p}", parameters={'p': p, 'attempts': SPLIT_ATTEMPTS})


def radical_splitting(order: Order, p: int) -> list:
    """
    Decomposition of `pO` in a p-maximal order: the p-radical is the product of the primes above `p`;
    it is split with minimal polynomials of random elements acting on `O/J`, and the ramification
    index of each prime `P` is the largest `e` with `p` in `P^e`.

    References:
        Cohen, "A Course in Computational Algebraic Number Theory", Algorithm 6.2.9.
    """
    radical = Ideal(order, order.p_radical(p))
    rng     = random.Random(p)
    primes  = []

    for P, f in _split(order, p, radical, rng):
        e     = 1
        power = P * P
        while e < order.degree and p in power:
            e    += 1
            power = power * P

        primes.append(PrimeIdeal.from_ideal(P, p, e, f))

    return primes


def decompose(order: Order, p: int) -> list:
    """
    Prime ideals above the rational prime `p`. Primes prime to the index go through Kummer-Dedekind;
    the others are decomposed in the p-maximal overorder by radical splitting.

    Parameters:
        order (Order): Order (normally the maximal order).
        p       (int): Rational prime.

    Returns:
        list: `PrimeIdeal`s, sorted by residue degree then ramification, with `sum(e*f) == n`.

    Examples:
        >>> from dedekind.math.polynomial import Polynomial
        >>> O = Order(Polynomial([1, 0, 1]))
        >>> [(P.e, P.f) for P in decompose(O, 5)]
        [(1, 1), (1, 1)]

        >>> [(P.e, P.f) for P in decompose(O, 3)]
        [(1, 2)]

    """
    if not is_prime(p):
        raise ValueError(f"{p} is not prime")

    if order.index() % p:
        log.debug(f"{p} is prime to the index; using Kummer-Dedekind")
        primes = kummer_dedekind(order, p)
    else:
        log.debug(f"{p} divides the index; splitting the radical")
        order  = order.p_maximal(p)
        primes = radical_splitting(order, p)

    primes = sorted(primes, key=_sort_key)
    _check_sum(order, p, primes)
    return primes


def factor_ideal(order: Order, ideal: Ideal) -> list:
    """
    Factorization of a non-zero integral ideal of a maximal order into prime ideals. Only primes
    above the rational primes dividing the norm can occur.

    Parameters:
        order (Order): Maximal order.
        ideal (Ideal): Integral ideal of `order`.

    Returns:
        list: Pairs `(P, k)` with `ideal == prod P^k`, ordered by `p` then as in `decompose`.

    Examples:
        >>> from dedekind.math.polynomial import Polynomial
        >>> O = Order(Polynomial([5, 0, 1]))
        >>> [(P.p, P.f, k) for P, k in factor_ideal(O, Ideal.principal(O, O(6)))]
        [(2, 1, 2), (3, 1, 1), (3, 1, 1)]

    """
    if not ideal.is_integral():
        raise ValueError("Only integral ideals are factored")

    result = []
    for p in sorted(factor(ideal.norm()).keys()):
        for P in decompose(order, p):
            k = P.ideal_valuation(ideal)
            if k:
                result.append((P, k))

    rebuilt = Ideal.unit(order)
    for P, k in result:
        rebuilt *= P.power(k)

    if rebuilt != ideal:
        raise InvariantViolationException("Prime factors do not multiply back to the ideal", parameters={'ideal': ideal.hnf, 'factors': [(P.p, P.e, P.f, k) for P, k in result]})

    return result
