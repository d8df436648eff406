from typing import Any

from .arithmetic_operators import ArithmeticOperators
from .elementary_functions import ElementaryFunctions


# FUNCTIONS

def sigmoid(a: Any) -> Any:
    """
    Calculate the logistic sigmoid 1 / (exp(-a) + 1) of a differentiable number.

    .. note::
        This only relies on negation, scalar addition, exp and scalar-numerator division, so it works for
        any differentiable number type that provides those, whether or not it derives from Sigmoid.

    :param a:   The differentiable number.
    :return:    The sigmoid of the differentiable number.
    """
    return 1.0 / ((-a).exp() + 1.0)


# CLASSES

class Sigmoid(ArithmeticOperators, ElementaryFunctions):
    """A mixin that gives any differentiable number with the arithmetic and elementary capabilities a sigmoid."""

    # PUBLIC METHODS

    def sigmoid(self) -> Any:
        """
        Calculate the logistic sigmoid of the differentiable number.

        :return:    The sigmoid of the differentiable number.
        """
        return sigmoid(self)
