from dedekind.core.base_object import BaseObject
from dedekind.math.algebra.fields.prime_field import PrimeField
from dedekind.math.algebra.rings.multiplication_table import MultiplicationTable, poly_mulmod
from dedekind.math.factorization.general import factor
from dedekind.math.general import product, valuation
from dedekind.math.hnf import hermite_normal_form_lower, rational_hnf
from dedekind.math.matrix import charpoly, determinant, solve_left_lower, vec_mat
from dedekind.math.numerical_roots import durand_kerner
from dedekind.math.polynomial import Polynomial
from dedekind.utilities.exceptions import InvalidPolynomialException, InvariantViolationException, NonConvergentOrderException
from fractions import Fraction
import logging

log = logging.getLogger(__name__)

# Extra enlargement rounds allowed per prime beyond the theoretical maximum
MAX_ENLARGEMENTS = 1

# Denominator of the rounded T2 Gram matrix
T2_SCALE = 2**20


def _simplify(q):
    q = Fraction(q)
    return q.numerator if q.denominator == 1 else q


class OrderElement(BaseObject):
    """
    Element of a number field, written in the basis of an order. Integral coordinates mean the
    element lies in the order.

    Examples:
        >>> from dedekind.math.polynomial import Polynomial
        >>> O = Order(Polynomial([1, 0, 1]))
        >>> a = O([2, 3])
        >>> a.norm(), a.trace()
        (13, 4)

    """

    def __init__(self, coords: list, order: 'Order'):
        self.coords = tuple(_simplify(c) for c in coords)
        self.order  = order


    def __reprdir__(self):
        return ['coords']


    def __str__(self) -> str:
        return str(self.to_polynomial())


    def __hash__(self) -> int:
        return hash((self.coords, self.order.hnf))


    def __eq__(self, other: object) -> bool:
        if isinstance(other, (int, Fraction)):
            other = self.order(other)

        return isinstance(other, OrderElement) and self.order == other.order and self.coords == other.coords


    def __iter__(self):
        return iter(self.coords)


    def __getitem__(self, idx: int):
        return self.coords[idx]


    def _coerce(self, other) -> 'OrderElement':
        if isinstance(other, OrderElement):
            return other

        return self.order(other)


    def __add__(self, other) -> 'OrderElement':
        other = self._coerce(other)
        return OrderElement([a+b for a, b in zip(self.coords, other.coords)], self.order)


    __radd__ = __add__


    def __neg__(self) -> 'OrderElement':
        return OrderElement([-a for a in self.coords], self.order)


    def __sub__(self, other) -> 'OrderElement':
        return self + (-self._coerce(other))


    def __rsub__(self, other) -> 'OrderElement':
        return self._coerce(other) - self


    def __mul__(self, other) -> 'OrderElement':
        if isinstance(other, (int, Fraction)):
            return OrderElement([a*other for a in self.coords], self.order)

        other = self._coerce(other)
        return OrderElement(self.order.multiplication_table.multiply(self.coords, other.coords), self.order)


    __rmul__ = __mul__


    def __pow__(self, e: int) -> 'OrderElement':
        if e < 0:
            raise ValueError("Only non-negative powers are supported")

        return OrderElement(self.order.multiplication_table.power(self.coords, e, self.order.one().coords), self.order)


    def is_integral(self) -> bool:
        return all(Fraction(c).denominator == 1 for c in self.coords)


    def to_power_basis(self) -> list:
        """
        Coordinates over `1, theta, ..., theta^(n-1)`.
        """
        d = self.order.denominator
        return [_simplify(Fraction(c, 1) / d) for c in vec_mat(self.coords, self.order.hnf)]


    def to_polynomial(self) -> Polynomial:
        return Polynomial(self.to_power_basis(), symbol=self.order.symbol)


    def matrix(self) -> list:
        """
        Matrix of multiplication by the element (row `k` is `self * w_k`).
        """
        return self.order.multiplication_table.left_matrix(self.coords)


    def norm(self):
        return determinant(self.matrix())


    def trace(self):
        return _simplify(sum(self.matrix()[i][i] for i in range(self.order.degree)))


    def characteristic_polynomial(self) -> Polynomial:
        return Polynomial(charpoly(self.matrix()))



class Order(BaseObject):
    """
    Order of the number field `Q[x]/(f)` for a monic integer polynomial `f`. The basis is kept as a
    lower Hermite normal form `H` with a common denominator `d` over the power basis, so `w_0 = 1`
    and two orders are equal exactly when `(H, d)` agree.

    Examples:
        >>> from dedekind.math.polynomial import Polynomial
        >>> O = Order(Polynomial([-5, 0, 1]))
        >>> O.discriminant()
        20

        >>> Ok = O.p_maximal(2)
        >>> Ok.discriminant(), Ok.index()
        (5, 2)

    """

    def __init__(self, polynomial: Polynomial, basis: list=None):
        """
        Parameters:
            polynomial (Polynomial): Monic integer polynomial defining the field.
            basis            (list): Rational generators over the power basis; the power order when omitted.
        """
        if polynomial.degree() < 1 or not polynomial.is_monic() or not polynomial.is_integral():
            raise InvalidPolynomialException(f"{polynomial} must be monic with integer coefficients", parameters={'polynomial': str(polynomial)})

        n = polynomial.degree()
        if basis is None:
            basis = [[int(i == j) for j in range(n)] for i in range(n)]

        H, d = rational_hnf(basis)
        if len(H) != n:
            raise InvariantViolationException("Order basis must have full rank", parameters={'rank': len(H), 'degree': n})

        self.polynomial  = polynomial
        self.symbol      = polynomial.symbol
        self.degree      = n
        self.hnf         = tuple(tuple(row) for row in H)
        self.denominator = d
        self._table      = None


    def __reprdir__(self):
        return ['polynomial', 'hnf', 'denominator']


    def __eq__(self, other: object) -> bool:
        return isinstance(other, Order) and (self.polynomial, self.hnf, self.denominator) == (other.polynomial, other.hnf, other.denominator)


    def __hash__(self) -> int:
        return hash((self.polynomial, self.hnf, self.denominator))


    def __call__(self, coords) -> OrderElement:
        """
        Element from order coordinates, or the rational integer `coords`.
        """
        if isinstance(coords, (int, Fraction)):
            return self.one() * coords

        return OrderElement(coords, self)


    def __contains__(self, element) -> bool:
        if isinstance(element, OrderElement):
            element = element.to_power_basis()

        return all(Fraction(c).denominator == 1 for c in self.coordinates(element))


    def shorthand(self) -> str:
        return f'O[{self.polynomial}]'


    @property
    def multiplication_table(self) -> MultiplicationTable:
        if self._table is None:
            self._table = MultiplicationTable(self)

        return self._table


    def one(self) -> OrderElement:
        return OrderElement([1] + [0]*(self.degree-1), self)


    def zero(self) -> OrderElement:
        return OrderElement([0]*self.degree, self)


    def basis(self) -> list:
        n = self.degree
        return [OrderElement([int(i == j) for j in range(n)], self) for i in range(n)]


    def power_basis_rows(self) -> list:
        d = self.denominator
        return [[Fraction(x, d) for x in row] for row in self.hnf]


    def coordinates(self, power_coords: list) -> list:
        """
        Coordinates in this order's basis of the field element with the given power-basis coordinates.
        """
        d = self.denominator
        return solve_left_lower(self.hnf, [Fraction(x)*d for x in power_coords])


    def element_from_power_basis(self, power_coords: list) -> OrderElement:
        return OrderElement(self.coordinates(power_coords), self)


    def covolume(self) -> Fraction:
        """
        Index of the power order relative to this one, inverted: `det(H) / d^n`.
        """
        return Fraction(product(self.hnf[i][i] for i in range(self.degree)), self.denominator**self.degree)


    def index(self, suborder: 'Order'=None) -> int:
        """
        Index `[self : suborder]`; the suborder defaults to the power order `Z[theta]`.
        """
        sub = suborder.covolume() if suborder else Fraction(1)
        idx = sub / self.covolume()
        if idx.denominator != 1:
            raise InvariantViolationException("Not a suborder", parameters={'index': idx})

        return idx.numerator


    def polynomial_discriminant(self) -> int:
        return self.polynomial.discriminant()


    def discriminant(self) -> int:
        """
        `disc(f) / [O : Z[theta]]^2`.
        """
        disc = self.polynomial_discriminant() * self.covolume()**2
        if disc.denominator != 1:
            raise InvariantViolationException("Order discriminant is not an integer", parameters={'discriminant': disc})

        return disc.numerator


    def trace_matrix(self) -> list:
        """
        Gram matrix of the trace form `Tr(w_i * w_j)`; its determinant is the discriminant.
        """
        T      = self.multiplication_table
        n      = self.degree
        traces = [T.trace([int(i == k) for i in range(n)]) for k in range(n)]
        return [[sum(c*t for c, t in zip(T[i, j], traces)) for j in range(n)] for i in range(n)]


    def t2_gram(self, scale: int=T2_SCALE) -> list:
        """
        Gram matrix of the positive definite form `T2(x) = sum |sigma(x)|^2` on the order basis,
        from approximate embeddings rounded to multiples of `1/scale`. Short vectors for this form
        have small norm.
        """
        roots = durand_kerner(self.polynomial)
        n     = self.degree
        vals  = [[sum(float(c) * z**k for k, c in enumerate(row)) for z in roots] for row in self.power_basis_rows()]
        return [[Fraction(round(sum((a * b.conjugate()).real for a, b in zip(vals[i], vals[j])) * scale), scale) for j in range(n)] for i in range(n)]


    def union(self, other: 'Order') -> 'Order':
        """
        Smallest order containing both orders (the ring they generate).
        """
        if self.polynomial != other.polynomial:
            raise ValueError("Orders belong to different fields")

        rows = self.power_basis_rows() + other.power_basis_rows()
        f    = self.polynomial.integer_coefficients()

        while True:
            current = Order(self.polynomial, rows)
            basis   = current.power_basis_rows()
            prods   = [poly_mulmod(a, b, f) for i, a in enumerate(basis) for b in basis[i:]]
            if all(p in current for p in prods):
                return current

            rows = basis + prods


    # Round 2

    def p_radical(self, p: int) -> list:
        """
        Generators, in order coordinates, of the p-radical `{x in O : x^k in pO for some k}`: the kernel
        of a power of the Frobenius map on `O/pO` together with `pO`.

        Parameters:
            p (int): Prime.

        Returns:
            list: Integer coordinate rows spanning the radical (full rank).
        """
        n = self.degree
        F = PrimeField(p)
        T = self.multiplication_table

        q = p
        while q < n:
            q *= p

        one   = self.one().coords
        frob  = [T.power([int(i == k) for i in range(n)], q, one, p) for k in range(n)]
        kern  = F.left_kernel(frob)
        return [list(v) for v in kern] + [[p*int(i == j) for j in range(n)] for i in range(n)]


    def ring_of_multipliers(self, p: int, ideal_rows: list) -> 'Order':
        """
        One enlargement step: `{x in K : x*I subset I}` for the ideal `I` of `O` containing `pO` spanned
        by `ideal_rows`, computed as `(1/p) * {x in O : x*I subset p*I}`.
        """
        n  = self.degree
        F  = PrimeField(p)
        T  = self.multiplication_table
        B  = hermite_normal_form_lower(ideal_rows)

        rows = []
        for i in range(n):
            w   = [int(i == k) for k in range(n)]
            row = []
            for beta in B:
                coords = solve_left_lower(B, T.multiply(w, beta))
                if any(Fraction(c).denominator != 1 for c in coords):
                    raise InvariantViolationException("Generators do not span an ideal", parameters={'p': p, 'coords': coords})

                row += [int(c) for c in coords]
            rows.append(row)

        kern = F.left_kernel(rows)
        if not kern:
            return self

        gens = [[Fraction(x, p) for x in vec_mat(u, self.power_basis_rows())] for u in kern]
        return Order(self.polynomial, self.power_basis_rows() + gens)


    def enlarge(self, p: int) -> 'Order':
        return self.ring_of_multipliers(p, self.p_radical(p))


    def p_maximal(self, p: int, max_rounds: int=None) -> 'Order':
        """
        Round 2 at `p`: enlarge by the ring of multipliers of the p-radical until it stops growing.

        Parameters:
            p          (int): Prime.
            max_rounds (int): Enlargement bound; derived from `v_p(disc)` when omitted.

        Returns:
            Order: The p-maximal order containing `self`.
        """
        disc = self.discriminant()
        if max_rounds is None:
            max_rounds = max(self.degree, valuation(disc, p) // 2) + MAX_ENLARGEMENTS

        order = self
        for step in range(max_rounds):
            bigger = order.enlarge(p)
            if bigger == order:
                return order

            log.debug(f"Round 2 at p={p}, step {step}: index grew to {bigger.index()}")
            order = bigger

        raise NonConvergentOrderException(f"Round 2 did not converge at p={p}", parameters={'p': p, 'rounds': max_rounds, 'polynomial': str(self.polynomial)})


    def is_p_maximal(self, p: int) -> bool:
        return self.enlarge(p) == self



def maximal_order(polynomial: Polynomial, visual: bool=False) -> Order:
    """
    Ring of integers of `Q[x]/(f)` by the Round 2 algorithm. Only primes whose square divides
    `disc(f)` can divide the index, so the discriminant is factored first.

    Parameters:
        polynomial (Polynomial): Monic irreducible integer polynomial.
        visual           (bool): Show factorization progress.

    Returns:
        Order: The maximal order.

    Examples:
        >>> maximal_order(Polynomial([37, 2, 1])).discriminant()
        -4

    References:
        Cohen, "A Course in Computational Algebraic Number Theory", Algorithm 6.1.8.
    """
    order = Order(polynomial)
    disc  = order.discriminant()

    for p, e in factor(disc, visual=visual).items():
        if e < 2:
            continue

        order = order.p_maximal(p)

    index      = order.index()
    field_disc = order.discriminant()
    trace_disc = determinant(order.trace_matrix())
    log.info(f"Maximal order of {polynomial}: index {index}, discriminant {field_disc}")

    # The covolume and the trace form must give the same discriminant
    if trace_disc != field_disc or index**2 * trace_disc != disc:
        raise InvariantViolationException("Index formula violated", parameters={'index': index, 'field_discriminant': field_disc, 'trace_discriminant': trace_disc, 'discriminant': disc})

    return order
