from dedekind.core.base_object import BaseObject
from dedekind.math.algebra.rings.order import Order, OrderElement
from dedekind.math.general import lcm, product
from dedekind.math.hnf import integer_left_kernel_mod, lattice_sum, rational_hnf
from dedekind.math.matrix import solve_left_lower
from dedekind.utilities.exceptions import InvariantViolationException, NotInvertibleException
from fractions import Fraction
import logging

log = logging.getLogger(__name__)


def _simplify(q):
    q = Fraction(q)
    return q.numerator if q.denominator == 1 else q


class Ideal(BaseObject):
    """
    Fractional ideal of an order, stored as the canonical lattice `H / d` in the coordinates of the
    order's basis (`H` a lower Hermite normal form, `d` minimal). Two ideals are equal exactly when
    their `(H, d)` agree. Every operation returns a new ideal.

    Examples:
        >>> from dedekind.math.polynomial import Polynomial
        >>> O = Order(Polynomial([5, 0, 1]))
        >>> P = Ideal.from_elements(O, [O(2), O([1, 1])])
        >>> P.norm()
        2

        >>> P*P == Ideal.principal(O, O(2))
        True

    """

    def __init__(self, order: Order, rows: list, denominator: int=1):
        """
        Parameters:
            order      (Order): Order acting on the ideal.
            rows        (list): Generators of the lattice, in order coordinates.
            denominator  (int): Common denominator of `rows`.
        """
        H, d = rational_hnf([[Fraction(x, denominator) for x in row] for row in rows])
        if len(H) != order.degree:
            raise ValueError("Ideal must be a non-zero, full-rank lattice")

        self.order       = order
        self.hnf         = tuple(tuple(row) for row in H)
        self.denominator = d


    def __reprdir__(self):
        return ['hnf', 'denominator']


    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ideal) and self.order == other.order and self.hnf == other.hnf and self.denominator == other.denominator


    def __hash__(self) -> int:
        return hash((self.hnf, self.denominator))


    def __str__(self) -> str:
        gens = ', '.join(str(g) for g in self.generators())
        return f'({gens})'


    @staticmethod
    def unit(order: Order) -> 'Ideal':
        n = order.degree
        return Ideal(order, [[int(i == j) for j in range(n)] for i in range(n)])


    @staticmethod
    def principal(order: Order, element) -> 'Ideal':
        """
        The ideal `element * O`.
        """
        if not isinstance(element, OrderElement):
            element = order(element)

        if not any(element.coords):
            raise ValueError("The zero ideal is not supported")

        return Ideal(order, element.matrix())


    @staticmethod
    def from_elements(order: Order, elements: list) -> 'Ideal':
        """
        The ideal generated, as an `O`-module, by the given elements.
        """
        rows = []
        for elem in elements:
            if not isinstance(elem, OrderElement):
                elem = order(elem)

            rows.extend(elem.matrix())

        return Ideal(order, rows)


    def generators(self) -> list:
        """
        Z-basis of the ideal as field elements.
        """
        d = self.denominator
        return [OrderElement([Fraction(x, d) for x in row], self.order) for row in self.hnf]


    def is_integral(self) -> bool:
        return self.denominator == 1


    def norm(self):
        """
        Index of the lattice in the order, `det(H) / d^n`; multiplicative.
        """
        det = product(self.hnf[i][i] for i in range(self.order.degree))
        return _simplify(Fraction(det, self.denominator**self.order.degree))


    def minimum(self):
        """
        Positive generator of the intersection with the rationals.
        """
        return _simplify(Fraction(self.hnf[0][0], self.denominator))


    def coordinates(self, element) -> list:
        """
        Coordinates of an element in the ideal's Z-basis.
        """
        coords = element.coords if isinstance(element, OrderElement) else element
        return solve_left_lower(self.hnf, [Fraction(c)*self.denominator for c in coords])


    def __contains__(self, element) -> bool:
        if isinstance(element, (int, Fraction)):
            element = self.order(element)

        return all(Fraction(c).denominator == 1 for c in self.coordinates(element))


    def contains_ideal(self, other: 'Ideal') -> bool:
        return all(g in self for g in other.generators())


    def divides(self, other: 'Ideal') -> bool:
        """
        For invertible ideals, `self | other` exactly when `other` is contained in `self`.
        """
        return self.contains_ideal(other)


    def is_closed(self) -> bool:
        """
        Whether the lattice is an `O`-module.
        """
        gens = self.generators()
        return all(w*g in self for w in self.order.basis() for g in gens)


    def _coerce(self, other) -> 'Ideal':
        if isinstance(other, Ideal):
            return other

        return Ideal.principal(self.order, other)


    def __add__(self, other: 'Ideal') -> 'Ideal':
        other = self._coerce(other)
        d     = lcm(self.denominator, other.denominator)
        A     = [[x * (d // self.denominator) for x in row] for row in self.hnf]
        B     = [[x * (d // other.denominator) for x in row] for row in other.hnf]
        return Ideal(self.order, lattice_sum(A, B), d)


    def __mul__(self, other) -> 'Ideal':
        other = self._coerce(other)
        T     = self.order.multiplication_table
        rows  = [T.multiply(a, b) for a in self.hnf for b in other.hnf]
        return Ideal(self.order, rows, self.denominator * other.denominator)


    __rmul__ = __mul__


    def inverse(self) -> 'Ideal':
        """
        The colon ideal `(O : I) = {x : x*I in O}`. With `a` the minimum of the integral part `J = d*I`,
        `(O : J) = (1/a) * {y in O : y*J in a*O}`, which is an integer kernel modulo `a`.

        Returns:
            Ideal: `I^-1`, checked to satisfy `I * I^-1 == O`.
        """
        n = self.order.degree
        T = self.order.multiplication_table
        d = self.denominator
        a = self.hnf[0][0]

        M = []
        for i in range(n):
            w   = [int(i == k) for k in range(n)]
            row = []
            for beta in self.hnf:
                row += T.multiply(w, beta)
            M.append(row)

        X   = integer_left_kernel_mod(M, a)
        inv = Ideal(self.order, [[x*d for x in row] for row in X], a)

        if self * inv != Ideal.unit(self.order):
            raise NotInvertibleException(f"{self} is not invertible in its order", parameters={'hnf': self.hnf, 'denominator': d})

        return inv


    def __invert__(self) -> 'Ideal':
        return self.inverse()


    def __truediv__(self, other) -> 'Ideal':
        return self * self._coerce(other).inverse()


    def __pow__(self, e: int) -> 'Ideal':
        if e < 0:
            return self.inverse() ** -e

        result = Ideal.unit(self.order)
        base   = self
        while e:
            if e & 1:
                result *= base
            base = base * base
            e >>= 1

        return result



class PrimeIdeal(Ideal):
    """
    Prime ideal above the rational prime `p` with ramification index `e` and residue degree `f`.
    """

    def __init__(self, order: Order, rows: list, p: int, e: int, f: int):
        super().__init__(order, rows)
        if e*f > order.degree:
            raise InvariantViolationException("e*f exceeds the field degree", parameters={'p': p, 'e': e, 'f': f})

        self.p = p
        self.e = e
        self.f = f
        self._powers = [Ideal.unit(order), self]


    @staticmethod
    def from_ideal(ideal: Ideal, p: int, e: int, f: int) -> 'PrimeIdeal':
        return PrimeIdeal(ideal.order, ideal.hnf, p, e, f)


    def __reprdir__(self):
        return ['p', 'e', 'f', 'hnf']


    def power(self, k: int) -> Ideal:
        while len(self._powers) <= k:
            self._powers.append(self._powers[-1] * self)

        return self._powers[k]


    def valuation(self, element) -> int:
        """
        Exponent of the prime in the principal ideal of a non-zero integral element.
        """
        if not isinstance(element, OrderElement):
            element = self.order(element)

        if not element.is_integral():
            raise ValueError("Valuations are computed for integral elements only")

        N = abs(element.norm())
        if not N:
            raise ValueError("The zero element has no valuation")

        k = 0
        while not N % (self.p**(self.f*(k+1))) and element in self.power(k+1):
            k += 1

        return k


    def ideal_valuation(self, ideal: Ideal) -> int:
        """
        Exponent of the prime in an integral ideal.
        """
        N = ideal.norm()
        k = 0
        while not N % (self.p**(self.f*(k+1))) and self.power(k+1).contains_ideal(ideal):
            k += 1

        return k
