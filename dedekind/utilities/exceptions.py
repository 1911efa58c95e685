class DedekindException(Exception):
    """
    Base of every error raised by `dedekind`.

    Parameters:
        message     (str): Human-readable cause.
        parameters (dict): Values that help reproduce the failure.
    """

    def __init__(self, message: str=None, parameters: dict=None):
        super().__init__(message or self.__class__.__name__)
        self.message    = message
        self.parameters = parameters or {}


    @property
    def kind(self) -> str:
        name = self.__class__.__name__
        return name[:-len('Exception')] if name.endswith('Exception') else name



class InvalidPolynomialException(DedekindException, ValueError):
    pass


class InvariantViolationException(DedekindException, AssertionError):
    pass


class NonConvergentOrderException(InvariantViolationException):
    pass


class ProbabilisticFailureException(DedekindException):
    pass


class FactorizationUnavailableException(ProbabilisticFailureException):
    pass


class RelationSearchExhaustedException(ProbabilisticFailureException):
    pass


class NotInvertibleException(DedekindException, ArithmeticError):
    pass


class NoSolutionException(DedekindException):
    pass
