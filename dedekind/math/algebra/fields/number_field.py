from dedekind.core.base_object import BaseObject
from dedekind.math.algebra.ideals.class_group import ClassGroup, class_group, minkowski_bound
from dedekind.math.algebra.ideals.ideal import Ideal
from dedekind.math.algebra.ideals.prime_decomposition import decompose, factor_ideal
from dedekind.math.algebra.rings.order import Order, maximal_order
from dedekind.math.factorization.zassenhaus import factor_over_integers
from dedekind.math.numerical_roots import embeddings
from dedekind.math.polynomial import Polynomial
from dedekind.utilities.exceptions import InvalidPolynomialException
from fractions import Fraction
import logging

log = logging.getLogger(__name__)


class NumberField(BaseObject):
    """
    The number field `Q[x]/(f)` for a monic irreducible integer polynomial `f`. Invariants are computed
    lazily and cached; the field and its maximal order never change after construction.

    Examples:
        >>> K = NumberField([-1, -1, 0, 1])
        >>> K.discriminant(), K.signature(), K.class_number()
        (-23, (1, 1), 1)

        >>> NumberField([3, -2, 1, 2])
        Traceback (most recent call last):
            ...
        dedekind.utilities.exceptions.InvalidPolynomialException: 2*x^3 + x^2 - 2*x + 3 is not monic

    """

    def __init__(self, polynomial, visual: bool=False):
        """
        Parameters:
            polynomial (Polynomial/list): Defining polynomial, or its coefficients in ascending order.
            visual               (bool): Show progress bars during long computations.
        """
        if not isinstance(polynomial, Polynomial):
            polynomial = Polynomial(polynomial)

        self._validate(polynomial)
        self.polynomial = polynomial
        self.visual     = visual
        self._order     = None
        self._cl        = None


    @staticmethod
    def _validate(f: Polynomial):
        if f.degree() < 1:
            raise InvalidPolynomialException(f"{f} has degree < 1", parameters={'degree': f.degree()})

        if not f.is_integral():
            raise InvalidPolynomialException(f"{f} has non-integral coefficients", parameters={'polynomial': str(f)})

        if not f.is_monic():
            raise InvalidPolynomialException(f"{f} is not monic", parameters={'leading_coefficient': str(f.LC())})

        if not f.is_squarefree():
            raise InvalidPolynomialException(f"{f} is not square-free", parameters={'gcd': str(f.gcd(f.derivative()))})

        facs = factor_over_integers(f)
        if len(facs) > 1:
            raise InvalidPolynomialException(f"{f} is reducible", parameters={'factors': [str(g) for g, _ in facs]})


    def __reprdir__(self):
        return ['polynomial']


    def __hash__(self) -> int:
        return hash(self.polynomial)


    def __eq__(self, other: object) -> bool:
        return isinstance(other, NumberField) and self.polynomial == other.polynomial


    def shorthand(self) -> str:
        return f'Q[x]/({self.polynomial})'


    def degree(self) -> int:
        return self.polynomial.degree()


    def polynomial_discriminant(self) -> int:
        return self.polynomial.discriminant()


    def signature(self) -> tuple:
        """
        `(r1, r2)`: numbers of real embeddings and of pairs of complex embeddings.
        """
        r1 = self.polynomial.count_real_roots()
        return r1, (self.degree() - r1) // 2


    def equation_order(self) -> Order:
        return Order(self.polynomial)


    def maximal_order(self) -> Order:
        if self._order is None:
            self._order = maximal_order(self.polynomial, visual=self.visual)

        return self._order


    def discriminant(self) -> int:
        """
        Field discriminant, the discriminant of the maximal order.
        """
        return self.maximal_order().discriminant()


    def index(self) -> int:
        """
        `[O_K : Z[theta]]`.
        """
        return self.maximal_order().index()


    def integral_basis(self) -> list:
        """
        Integral basis as polynomials in the generator.
        """
        return [w.to_polynomial() for w in self.maximal_order().basis()]


    def minkowski_bound(self) -> Fraction:
        return minkowski_bound(self.degree(), self.signature()[1], self.discriminant())


    def ideal(self, *generators) -> Ideal:
        """
        Ideal of the maximal order generated by field elements given as polynomials or power-basis coordinates.
        """
        O     = self.maximal_order()
        elems = []
        for g in generators:
            if isinstance(g, int):
                elems.append(O(g))
                continue

            if not isinstance(g, Polynomial):
                g = Polynomial(g)

            coeffs = list((g % self.polynomial).coeffs)
            elems.append(O.element_from_power_basis(coeffs + [0]*(self.degree() - len(coeffs))))

        return Ideal.from_elements(O, elems)


    def prime_decomposition(self, p: int) -> list:
        return decompose(self.maximal_order(), p)


    def factor_ideal(self, ideal: Ideal) -> list:
        """
        Prime ideal factorization `[(P, k), ...]` of an integral ideal of the maximal order.
        """
        return factor_ideal(self.maximal_order(), ideal)


    def class_group(self) -> ClassGroup:
        if self._cl is None:
            self._cl = class_group(self.maximal_order(), self.signature()[1], visual=self.visual)

        return self._cl


    def class_number(self) -> int:
        return self.class_group().class_number


    def embeddings(self) -> tuple:
        """
        Approximate real roots and complex roots (one per conjugate pair), for display.
        """
        return embeddings(self.polynomial, self.signature()[0])
