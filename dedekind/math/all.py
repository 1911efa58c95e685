from .general import *
from .algebra.all import *
from .factorization.all import *
from .hnf import hermite_normal_form, hermite_normal_form_lower, hermite_normal_form_mod, integer_left_kernel, lattice_sum, rational_hnf
from .lll import lll_reduce
from .matrix import determinant, inverse, charpoly
from .numerical_roots import durand_kerner, embeddings
from .polynomial import Polynomial, X
from .snf import smith_normal_form, invariant_factors
