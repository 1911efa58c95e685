from dedekind.core.base_object import BaseObject
from dedekind.math.general import product
from itertools import product as cartesian


class Factors(BaseObject):
    """
    Multiset of prime factors, `{prime: exponent}`, kept in ascending order of the prime.

    Examples:
        >>> f = Factors({2: 3, 5: 1})
        >>> f.recombine()
        40

        >>> (f * Factors({5: 2, 7: 1})).recombine()
        7000

    """

    def __init__(self, factors: dict=None):
        self.factors = {}
        for fac, e in sorted((factors or {}).items()):
            if e:
                self.factors[fac] = e


    def __reprdir__(self):
        return ['factors']


    def __getitem__(self, idx):
        return self.factors[idx]


    def __contains__(self, fac) -> bool:
        return fac in self.factors


    def __iter__(self):
        return iter(self.factors)


    def __len__(self) -> int:
        return len(self.factors)


    def __eq__(self, other: 'Factors') -> bool:
        if type(other) is dict:
            other = Factors(other)

        return type(other) is Factors and self.factors == other.factors


    def __hash__(self) -> int:
        return hash(tuple(self.factors.items()))


    def items(self):
        return self.factors.items()


    def keys(self):
        return self.factors.keys()


    def values(self):
        return self.factors.values()


    def get(self, fac, default=0):
        return self.factors.get(fac, default)


    def add(self, fac, e: int=1):
        facs = dict(self.factors)
        facs[fac] = facs.get(fac, 0) + e
        self.factors = Factors(facs).factors


    def __mul__(self, other: 'Factors') -> 'Factors':
        facs = dict(self.factors)
        for fac, e in other.items():
            facs[fac] = facs.get(fac, 0) + e

        return Factors(facs)


    __add__ = __mul__


    def __pow__(self, e: int) -> 'Factors':
        return Factors({fac: exp*e for fac, exp in self.items()})


    def recombine(self) -> int:
        return product(fac**e for fac, e in self.items())


    def divisors(self) -> list:
        """
        All positive divisors, ascending.
        """
        facs  = list(self.items())
        divs  = []
        for exps in cartesian(*[range(e+1) for _, e in facs]):
            divs.append(product(p**k for (p, _), k in zip(facs, exps)))

        return sorted(divs)


    def square_part(self) -> 'Factors':
        """
        The largest square dividing the number, as the factorization of its square root.
        """
        return Factors({p: e // 2 for p, e in self.items()})
