from .factors import Factors
from .general import factor, trial_division, pollard_rho
from .ecm import ecm
from .zassenhaus import factor_over_integers, is_irreducible_over_integers
