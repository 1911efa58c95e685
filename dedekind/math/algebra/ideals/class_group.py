from dedekind.core.base_object import BaseObject
from dedekind.math.algebra.ideals.ideal import Ideal
from dedekind.math.algebra.ideals.prime_decomposition import decompose
from dedekind.math.algebra.rings.order import Order
from dedekind.math.factorization.general import trial_division
from dedekind.math.general import kronecker, kth_root, primes, product
from dedekind.math.hnf import hermite_normal_form
from dedekind.math.lll import lll_reduce
from dedekind.math.snf import invariant_factors
from dedekind.utilities.exceptions import InvariantViolationException, RelationSearchExhaustedException
from fractions import Fraction
from tqdm import tqdm
import logging
import math
import random

log = logging.getLogger(__name__)

SEARCH_RADIUS = 3
MAX_BATCHES   = 40
STABLE_ROUNDS = 3
RANDOM_PRIMES = 3

# Largest |d| for which the analytic class number of an imaginary quadratic field is summed
ANALYTIC_BOUND = 10**6

# Rational lower bound for pi, so that 4/pi is over-estimated
_PI_LOWER = Fraction(314159, 100000)

# Decimal digits kept when rounding sqrt(|d|) up
_SQRT_DIGITS = 6


def is_fundamental_discriminant(D: int) -> bool:
    """
    Whether `D` is the discriminant of a quadratic field.

    Examples:
        >>> [D for D in range(-12, 0) if is_fundamental_discriminant(D)]
        [-11, -8, -7, -4, -3]

    """
    if D in (0, 1):
        return False

    if D % 4 == 1:
        m = D
    elif D % 4 == 0 and (D // 4) % 4 in (2, 3):
        m = D // 4
    else:
        return False

    m = abs(m)
    return all(m % (p*p) for p in primes(2, math.isqrt(m)))


def analytic_class_number(D: int) -> int:
    """
    Class number of the imaginary quadratic field of discriminant `D` from Dirichlet's formula
    `h = w / (2*(2 - chi(2))) * sum_{1 <= a <= |D|/2} chi(a)`, `chi = (D/.)` the Kronecker symbol.

    Parameters:
        D (int): Negative fundamental discriminant.

    Returns:
        int: The class number.

    Examples:
        >>> [analytic_class_number(D) for D in [-3, -4, -20, -23, -47]]
        [1, 1, 2, 3, 5]

    References:
        Cohen, "A Course in Computational Algebraic Number Theory", Proposition 5.3.12.
    """
    if D >= 0 or not is_fundamental_discriminant(D):
        raise ValueError(f"{D} is not a negative fundamental discriminant")

    w = {-3: 6, -4: 4}.get(D, 2)
    s = sum(kronecker(D, a) for a in range(1, abs(D)//2 + 1))
    h = Fraction(w * s, 2 * (2 - kronecker(D, 2)))

    if h.denominator != 1 or h < 1:
        raise InvariantViolationException("Analytic class number is not a positive integer", parameters={'D': D, 'h': h})

    return int(h)


def minkowski_bound(degree: int, r2: int, discriminant: int) -> Fraction:
    """
    Exact rational upper bound for `n!/n^n * (4/pi)^r2 * sqrt(|d|)`. Every ideal class contains an
    integral ideal of norm at most this value.

    Examples:
        >>> minkowski_bound(2, 1, -20) < 3
        True

        >>> minkowski_bound(3, 1, -23) < 2
        True

    """
    scale = 10**_SQRT_DIGITS
    d     = abs(discriminant) * scale**2
    root  = kth_root(d, 2)
    sqrtd = Fraction(root if root*root == d else root + 1, scale)
    return Fraction(math.factorial(degree), degree**degree) * (4 / _PI_LOWER)**r2 * sqrtd



class ClassGroup(BaseObject):
    """
    Structure of the ideal class group: invariant factors `d_1 | d_2 | ...` (all greater than one)
    and the class number, their product.
    """

    def __init__(self, invariants: list, factor_base: list, relations: int, bound: Fraction):
        self.invariants   = list(invariants)
        self.class_number = product(self.invariants)
        self.factor_base  = factor_base
        self.relations    = relations
        self.bound        = bound


    def __reprdir__(self):
        return ['class_number', 'invariants']


    def __str__(self) -> str:
        if not self.invariants:
            return 'C1'

        return ' x '.join(f'C{d}' for d in self.invariants)


    def is_trivial(self) -> bool:
        return self.class_number == 1



def _ball(n: int, radius: int):
    """
    Non-zero integer vectors of length `n` with L1 norm at most `radius`, one of each pair `+-v`.
    """
    def rec(i, budget):
        if i == n:
            yield []
            return

        for c in range(-budget, budget+1):
            for rest in rec(i+1, budget - abs(c)):
                yield [c] + rest

    for v in rec(0, radius):
        first = next((c for c in v if c), 0)
        if first > 0:
            yield v


def _smooth_factorization(N: int, bound: int):
    """
    Factorization of `N` when all of its prime factors are at most `bound`, else None.
    """
    facs, cofactor = trial_division(abs(N), bound)
    if cofactor > 1:
        if cofactor > bound:
            return None

        facs.add(cofactor)

    return facs



class _RelationSearch(object):
    def __init__(self, order: Order, factor_base: list, decompositions: dict, bound: int, rng: random.Random):
        self.order          = order
        self.factor_base    = factor_base
        self.decompositions = decompositions
        self.bound          = bound
        self.rng            = rng
        self.index          = {P: i for i, P in enumerate(factor_base)}
        self.relations      = set()
        self.gram           = order.t2_gram()


    def add(self, vector: list):
        if any(vector):
            self.relations.add(tuple(vector))


    def valuation_vector(self, element) -> list:
        """
        Exponents of `(element)` on the factor base, or None if it has a prime factor outside it.
        Inert primes `pO` are principal and are left out of the vector.
        """
        N = abs(element.norm())
        if not N:
            return None

        facs = _smooth_factorization(N, self.bound)
        if facs is None:
            return None

        vector = [0]*len(self.factor_base)

        for p, k in facs.items():
            if p not in self.decompositions:
                return None

            total = 0
            for P in self.decompositions[p]:
                v = P.valuation(element)
                if not v:
                    continue

                total += v*P.f
                if P in self.index:
                    vector[self.index[P]] = v
                elif P.f != self.order.degree:
                    return None

            if total != k:
                raise InvariantViolationException("Valuations do not account for the norm", parameters={'p': p, 'norm_exponent': k, 'valuations': total})

        return vector


    def random_ideal(self, P: Ideal, size: int=RANDOM_PRIMES) -> Ideal:
        """
        `P` times a random product of factor-base primes, each to the power one or two.
        """
        I = P
        for Q in self.rng.sample(self.factor_base, min(size, len(self.factor_base))):
            I = I * Q**self.rng.randint(1, 2)

        return I


    def search(self, lattice: Ideal, radius: int):
        rows = lll_reduce([list(row) for row in lattice.hnf], gram=self.gram)
        for coeffs in _ball(self.order.degree, radius):
            coords = [sum(c*row[j] for c, row in zip(coeffs, rows)) for j in range(self.order.degree)]
            vector = self.valuation_vector(self.order(coords))
            if vector is not None:
                self.add(vector)



def class_group(order: Order, r2: int, visual: bool=False, radius: int=SEARCH_RADIUS, max_batches: int=MAX_BATCHES, stable_rounds: int=STABLE_ROUNDS) -> ClassGroup:
    """
    Class group of a maximal order by relation search over the prime ideals of norm up to the
    Minkowski bound.

    Relations come from `pO = prod P^e`, from the short elements of the order and of every
    factor-base prime, and then in batches from the LLL-reduced short elements of random products
    `P_j * prod P_i^a_i`. The determinant of the relation lattice is always a multiple of the class
    number. For an imaginary quadratic field (unit rank zero) it is certified against the analytic
    class number; otherwise batches are added until it has not dropped for `stable_rounds` batches.
    The Smith normal form of the relation lattice gives the invariant factors.

    Parameters:
        order         (Order): Maximal order.
        r2              (int): Number of complex places (for the Minkowski bound).
        visual         (bool): Whether or not to show a progress bar.
        radius          (int): L1 radius of the coefficient vectors tried in each reduced basis.
        max_batches     (int): Number of random batches before giving up.
        stable_rounds   (int): Batches the class number must stay unchanged (non-zero unit rank).

    Returns:
        ClassGroup: The class group.

    Examples:
        >>> from dedekind.math.polynomial import Polynomial
        >>> from dedekind.math.algebra.rings.order import maximal_order
        >>> class_group(maximal_order(Polynomial([5, 0, 1])), 1).class_number
        2

    References:
        Buchmann, "A subexponential algorithm for the determination of class groups and regulators of algebraic number fields" (1990).
        Hafner, McCurley, "A rigorous subexponential algorithm for computation of class groups" (1989).
    """
    disc   = order.discriminant()
    bound  = minkowski_bound(order.degree, r2, disc)
    ibound = math.floor(bound)
    log.info(f"Minkowski bound {float(bound):.3f}")

    if ibound < 2:
        return ClassGroup([], [], 0, bound)

    decompositions = {}
    factor_base    = []
    for p in primes(2, ibound):
        decompositions[p] = decompose(order, p)
        factor_base      += [P for P in decompositions[p] if p**P.f <= ibound]

    if not factor_base:
        return ClassGroup([], [], 0, bound)

    k = len(factor_base)
    log.info(f"Factor base has {k} prime ideals")
    search = _RelationSearch(order, factor_base, decompositions, ibound, random.Random(disc))

    for p, above in decompositions.items():
        if all(P in search.index for P in above):
            vector = [0]*k
            for P in above:
                vector[search.index[P]] = P.e
            search.add(vector)

    target = None
    if order.degree == 2 and r2 == 1 and abs(disc) <= ANALYTIC_BOUND and is_fundamental_discriminant(disc):
        target = analytic_class_number(disc)
        log.info(f"Analytic class number {target}")

    history = []
    for batch in range(max_batches+1):
        if batch:
            lattices = [search.random_ideal(P) for P in factor_base]
        else:
            lattices = [Ideal.unit(order)] + list(factor_base)

        iterator = lattices
        if visual:
            iterator = tqdm(lattices, unit='ideal', desc=f"Relation search (batch {batch})")

        for lattice in iterator:
            search.search(lattice, radius)

        H = hermite_normal_form(list(search.relations))
        if len(H) < k:
            log.debug(f"Batch {batch}: {len(search.relations)} relations, rank {len(H)} of {k}")
            history = []
            continue

        h = product(H[i][i] for i in range(k))
        log.debug(f"Batch {batch}: {len(search.relations)} relations, class number bound {h}")

        if target is not None:
            if h % target:
                raise InvariantViolationException("Relation lattice determinant is not a multiple of the class number", parameters={'determinant': h, 'class_number': target})

            if h == target:
                return ClassGroup(invariant_factors(H), factor_base, len(search.relations), bound)

            continue

        history.append(h)
        if h == 1 or (len(history) >= stable_rounds and len(set(history[-stable_rounds:])) == 1):
            return ClassGroup(invariant_factors(H), factor_base, len(search.relations), bound)

    raise RelationSearchExhaustedException("Relation search did not stabilize", parameters={'max_batches': max_batches, 'relations': len(search.relations), 'factor_base': k})
