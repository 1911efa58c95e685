from dedekind.core.base_object import BaseObject
from dedekind.math.general import gcd, lcm
from dedekind.utilities.exceptions import InvalidPolynomialException
from fractions import Fraction


def _simplify(q: Fraction):
    """
    Returns `q` as an `int` when it is integral.
    """
    q = Fraction(q)
    return q.numerator if q.denominator == 1 else q


def _strip(coeffs: list) -> list:
    while coeffs and not coeffs[-1]:
        coeffs.pop()
    return coeffs


def _int_prem(a: list, b: list) -> list:
    """
    Pseudo-remainder of integer coefficient lists: `lc(b)^(deg a - deg b + 1) * a mod b`.
    """
    r  = list(a)
    db = len(b) - 1
    lb = b[-1]
    e  = len(a) - len(b) + 1

    while r and len(r) - 1 >= db:
        shift = len(r) - 1 - db
        lr    = r[-1]
        r     = [c*lb for c in r]

        for i, c in enumerate(b):
            r[shift+i] -= lr*c

        _strip(r)
        e -= 1

    if e > 0:
        factor = lb**e
        r = [c*factor for c in r]

    return r


class Polynomial(BaseObject):
    """
    Univariate polynomial with exact rational coefficients. Coefficients are stored in
    ascending order of the power of the indeterminate and the value is immutable.

    Examples:
        >>> f = Polynomial([-1, -1, 0, 1])
        >>> f
        <Polynomial: x^3 - x - 1>

        >>> f.discriminant()
        -23

        >>> Polynomial([3, -2, 1, 2]).discriminant()
        -1132

    """

    def __init__(self, coeffs: list=None, symbol: str='x'):
        """
        Parameters:
            coeffs (list): Coefficients, index `i` holding the coefficient of `x^i`.
            symbol  (str): Name of the indeterminate, for display only.
        """
        if isinstance(coeffs, Polynomial):
            coeffs = coeffs.coeffs

        self.coeffs = tuple(_strip([Fraction(c) for c in (coeffs or [])]))
        self.symbol = symbol


    @staticmethod
    def from_descending(coeffs: list, symbol: str='x') -> 'Polynomial':
        return Polynomial(list(coeffs)[::-1], symbol=symbol)


    @staticmethod
    def monomial(degree: int, coeff=1, symbol: str='x') -> 'Polynomial':
        return Polynomial([0]*degree + [coeff], symbol=symbol)


    def __reprdir__(self):
        return ['coeffs']


    def __repr__(self) -> str:
        return f'<Polynomial: {self}>'


    def __str__(self) -> str:
        if not self.coeffs:
            return '0'

        terms = []
        for idx in reversed(range(len(self.coeffs))):
            c = self.coeffs[idx]
            if not c:
                continue

            if idx == 0:
                mono = ''
            elif idx == 1:
                mono = self.symbol
            else:
                mono = f'{self.symbol}^{idx}'

            mag = abs(c)
            if mono and mag == 1:
                body = mono
            elif mono:
                body = f'{mag}*{mono}'
            else:
                body = str(mag)

            if not terms:
                terms.append(('-' if c < 0 else '') + body)
            else:
                terms.append(('- ' if c < 0 else '+ ') + body)

        return ' '.join(terms)


    def __hash__(self) -> int:
        return hash((Polynomial, self.coeffs))


    def __eq__(self, other: object) -> bool:
        if isinstance(other, (int, Fraction)):
            other = Polynomial([other])

        return isinstance(other, Polynomial) and self.coeffs == other.coeffs


    def __getitem__(self, idx: int) -> Fraction:
        if 0 <= idx < len(self.coeffs):
            return self.coeffs[idx]

        return Fraction(0)


    def __iter__(self):
        return iter(self.coeffs)


    def __bool__(self) -> bool:
        return bool(self.coeffs)


    def degree(self) -> int:
        """
        Degree of the polynomial; -1 for the zero polynomial.
        """
        return len(self.coeffs) - 1


    def LC(self) -> Fraction:
        return self.coeffs[-1] if self.coeffs else Fraction(0)


    def is_zero(self) -> bool:
        return not self.coeffs


    def is_monic(self) -> bool:
        return self.LC() == 1


    def is_integral(self) -> bool:
        return all(c.denominator == 1 for c in self.coeffs)


    def integer_coefficients(self) -> list:
        if not self.is_integral():
            raise InvalidPolynomialException(f"{self} has non-integral coefficients")

        return [c.numerator for c in self.coeffs]


    def reduce_mod(self, p: int) -> list:
        """
        Coefficients reduced into `[0, p)`; the denominators must be prime to `p`.
        """
        return [c.numerator * pow(c.denominator, -1, p) % p for c in self.coeffs]


    def _coerce(self, other) -> 'Polynomial':
        if isinstance(other, Polynomial):
            return other

        return Polynomial([other], symbol=self.symbol)


    def __add__(self, other) -> 'Polynomial':
        other = self._coerce(other)
        n     = max(len(self.coeffs), len(other.coeffs))
        return Polynomial([self[i] + other[i] for i in range(n)], symbol=self.symbol)


    __radd__ = __add__


    def __neg__(self) -> 'Polynomial':
        return Polynomial([-c for c in self.coeffs], symbol=self.symbol)


    def __sub__(self, other) -> 'Polynomial':
        return self + (-self._coerce(other))


    def __rsub__(self, other) -> 'Polynomial':
        return self._coerce(other) - self


    def __mul__(self, other) -> 'Polynomial':
        if not isinstance(other, Polynomial):
            other = Fraction(other)
            return Polynomial([c*other for c in self.coeffs], symbol=self.symbol)

        if not self.coeffs or not other.coeffs:
            return Polynomial([], symbol=self.symbol)

        result = [Fraction(0)] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            if a:
                for j, b in enumerate(other.coeffs):
                    result[i+j] += a*b

        return Polynomial(result, symbol=self.symbol)


    __rmul__ = __mul__


    def __pow__(self, e: int) -> 'Polynomial':
        if e < 0:
            raise ValueError("Polynomials only support non-negative powers")

        result = Polynomial([1], symbol=self.symbol)
        base   = self
        while e:
            if e & 1:
                result *= base
            base *= base
            e >>= 1

        return result


    def __divmod__(self, other) -> tuple:
        other = self._coerce(other)
        if other.is_zero():
            raise ZeroDivisionError("Polynomial division by zero")

        r  = list(self.coeffs)
        db = other.degree()
        lb = other.LC()
        q  = [Fraction(0)] * max(len(r) - db, 0)

        while len(r) - 1 >= db and r:
            shift    = len(r) - 1 - db
            c        = r[-1] / lb
            q[shift] = c

            for i, b in enumerate(other.coeffs):
                r[shift+i] -= c*b

            r.pop()
            _strip(r)

        return Polynomial(q, symbol=self.symbol), Polynomial(r, symbol=self.symbol)


    def __floordiv__(self, other) -> 'Polynomial':
        return divmod(self, other)[0]


    def __mod__(self, other) -> 'Polynomial':
        return divmod(self, other)[1]


    def __truediv__(self, other) -> 'Polynomial':
        """
        Exact division; raises `ArithmeticError` if there is a remainder.
        """
        q, r = divmod(self, other)
        if r:
            raise ArithmeticError(f"{other} does not divide {self}")

        return q


    def pseudo_divmod(self, other: 'Polynomial') -> tuple:
        """
        Pseudo-division: returns `(q, r)` with `lc(other)^(deg self - deg other + 1) * self == q*other + r`.
        No fractions are introduced when both inputs have integer coefficients.
        """
        other = self._coerce(other)
        e     = max(self.degree() - other.degree() + 1, 0)
        scale = other.LC()**e
        q, r  = divmod(self * scale, other)
        return q, r


    def __call__(self, x):
        result = 0
        for c in reversed(self.coeffs):
            result = result * x + c

        return result


    def derivative(self) -> 'Polynomial':
        return Polynomial([i*c for i, c in enumerate(self.coeffs)][1:], symbol=self.symbol)


    def content(self) -> Fraction:
        """
        Positive rational `c` such that `self / c` has coprime integer coefficients.
        """
        if not self.coeffs:
            return Fraction(0)

        return Fraction(gcd(*[c.numerator for c in self.coeffs]), lcm(*[c.denominator for c in self.coeffs]))


    def primitive_part(self) -> 'Polynomial':
        if not self.coeffs:
            return self

        return self * (1 / self.content())


    def monic(self) -> 'Polynomial':
        if not self.coeffs:
            return self

        return self * (1 / self.LC())


    def gcd(self, other: 'Polynomial') -> 'Polynomial':
        """
        Monic greatest common divisor over the rationals.
        """
        a, b = self.primitive_part(), self._coerce(other).primitive_part()
        while b:
            a, b = b, (a % b).primitive_part()

        return a.monic()


    def is_squarefree(self) -> bool:
        return self.degree() >= 0 and self.gcd(self.derivative()).degree() == 0


    def resultant(self, other: 'Polynomial'):
        """
        Resultant by the sub-resultant pseudo-remainder sequence. Contents are removed first and
        every pseudo-remainder is divided exactly by `g*h^delta`, which keeps the coefficients small.

        Parameters:
            other (Polynomial): Second polynomial.

        Returns:
            int/Fraction: The resultant `res(self, other)`.

        Examples:
            >>> Polynomial([5, 0, 2, 0, 6, 9]).resultant(Polynomial([6, 6, 6, 1, 7]))
            335159672

        References:
            Cohen, "A Course in Computational Algebraic Number Theory", Algorithm 3.3.7.
        """
        other = self._coerce(other)
        if self.is_zero() or other.is_zero():
            return 0

        a, b = self.content(), other.content()
        A    = self.primitive_part().integer_coefficients()
        B    = other.primitive_part().integer_coefficients()
        t    = a**other.degree() * b**self.degree()
        g, h, s = 1, 1, 1

        if len(A) < len(B):
            A, B = B, A
            if (len(A)-1) % 2 and (len(B)-1) % 2:
                s = -1

        while True:
            dA, dB = len(A)-1, len(B)-1
            delta  = dA - dB

            if dA % 2 and dB % 2:
                s = -s

            R    = _int_prem(A, B)
            div  = g * h**delta
            A, B = B, [c // div for c in R]
            g    = A[-1]
            h    = h if not delta else g**delta // h**(delta-1)

            if len(B) - 1 <= 0:
                break

        dA  = len(A) - 1
        lb  = B[-1] if B else 0
        if dA:
            h = Fraction(lb**dA, h**(dA-1))

        return _simplify(s * t * h)


    def discriminant(self):
        """
        Discriminant `(-1)^(n(n-1)/2) * res(f, f') / lc(f)`. Defined for every polynomial of
        degree at least one, monic or not.

        Returns:
            int/Fraction: The discriminant.
        """
        n = self.degree()
        if n < 1:
            raise InvalidPolynomialException(f"The discriminant of {self} is undefined", parameters={'degree': n})

        res  = Fraction(self.resultant(self.derivative()))
        sign = -1 if (n*(n-1)//2) % 2 else 1
        return _simplify(sign * res / self.LC())


    def sturm_sequence(self) -> list:
        seq = [self, self.derivative()]
        while seq[-1]:
            seq.append(-(seq[-2] % seq[-1]))

        return seq[:-1]


    def count_real_roots(self) -> int:
        """
        Number of distinct real roots, by Sturm's theorem.

        Examples:
            >>> Polynomial([-2, 0, 1]).count_real_roots()
            2

            >>> Polynomial([-1, -1, 0, 1]).count_real_roots()
            1

        """
        if self.degree() < 1:
            return 0

        def variations(signs):
            signs = [sg for sg in signs if sg]
            return sum(1 for x, y in zip(signs, signs[1:]) if x*y < 0)

        seq       = self.sturm_sequence()
        at_pos    = [1 if q.LC() > 0 else -1 for q in seq]
        at_neg    = [(1 if q.LC() > 0 else -1) * (-1)**q.degree() for q in seq]
        return variations(at_neg) - variations(at_pos)



X = Polynomial([0, 1])
