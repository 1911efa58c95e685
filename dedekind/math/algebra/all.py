from .fields.prime_field import PrimeField
from .fields.number_field import NumberField
from .rings.multiplication_table import MultiplicationTable
from .rings.order import Order, OrderElement, maximal_order
from .ideals.ideal import Ideal, PrimeIdeal
from .ideals.prime_decomposition import decompose, factor_ideal, kummer_dedekind, radical_splitting
from .ideals.class_group import ClassGroup, analytic_class_number, class_group, minkowski_bound
