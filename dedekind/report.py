from dedekind.core.base_object import BaseObject
from dedekind.math.algebra.fields.number_field import NumberField
from dedekind.math.numerical_roots import embeddings
from dedekind.math.polynomial import Polynomial
from fractions import Fraction
import itertools
import logging

log = logging.getLogger(__name__)

# Invariants that only need the polynomial; the rest need a valid number field
POLYNOMIAL_INVARIANTS = ('polynomial', 'degree', 'discriminant', 'signature', 'roots', 'resultant')
FIELD_INVARIANTS      = ('field_discriminant', 'index', 'integral_basis', 'minkowski_bound', 'class_number', 'class_group')
INVARIANTS            = POLYNOMIAL_INVARIANTS + FIELD_INVARIANTS
DEFAULT_INVARIANTS    = ('polynomial', 'discriminant', 'signature', 'field_discriminant', 'index', 'integral_basis', 'class_number')


def render(value) -> str:
    """
    Exact string form of a computed value; integers and rationals are never truncated.
    """
    if isinstance(value, Fraction):
        return str(value.numerator) if value.denominator == 1 else f'{value.numerator}/{value.denominator}'

    if isinstance(value, (list, tuple)):
        return '[' + ', '.join(render(v) for v in value) + ']'

    if isinstance(value, complex):
        return f'{value.real:.10g}{value.imag:+.10g}i'

    if isinstance(value, float):
        return f'{value:.10g}'

    return str(value)



class Report(BaseObject):
    """
    Computes a list of named invariants of a defining polynomial.

    Examples:
        >>> Report(Polynomial([3, -2, 1, 2])).compute(['discriminant'])
        {'discriminant': '-1132'}

    """

    def __init__(self, polynomial: Polynomial, other: Polynomial=None, visual: bool=False):
        self.polynomial = polynomial
        self.other      = other
        self.visual     = visual
        self._field     = None


    def __reprdir__(self):
        return ['polynomial', 'other']


    def field(self) -> NumberField:
        if self._field is None:
            self._field = NumberField(self.polynomial, visual=self.visual)

        return self._field


    def value(self, name: str):
        f = self.polynomial

        if name == 'polynomial':
            return f
        elif name == 'degree':
            return f.degree()
        elif name == 'discriminant':
            return f.discriminant()
        elif name == 'signature':
            r1 = f.count_real_roots()
            return (r1, (f.degree() - r1) // 2)
        elif name == 'roots':
            real, cplx = embeddings(f)
            return list(real) + list(cplx)
        elif name == 'resultant':
            if self.other is None:
                raise ValueError("The resultant needs a second polynomial")
            return f.resultant(self.other)
        elif name == 'field_discriminant':
            return self.field().discriminant()
        elif name == 'index':
            return self.field().index()
        elif name == 'integral_basis':
            return self.field().integral_basis()
        elif name == 'minkowski_bound':
            return self.field().minkowski_bound()
        elif name == 'class_number':
            return self.field().class_number()
        elif name == 'class_group':
            return self.field().class_group()

        raise ValueError(f"Unknown invariant '{name}'; choose from {', '.join(INVARIANTS)}")


    def compute(self, names: list) -> dict:
        """
        Parameters:
            names (list): Requested invariants.

        Returns:
            dict: Invariant name to exact string, in request order.
        """
        result = {}
        for name in names:
            log.info(f"Computing {name}")
            result[name] = render(self.value(name))

        return result


    @staticmethod
    def pretty(values: dict, title: str="Invariants"):
        from rich.table import Table
        from rich import print

        table  = Table(title=title, show_lines=True)
        styles = itertools.cycle(["cyan", "green"])

        for name, style in zip(['Invariant', 'Value'], styles):
            table.add_column(name, style="bold " + style)

        for name, value in values.items():
            table.add_row(name, value)

        print()
        print(table)
