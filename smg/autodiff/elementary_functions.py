from abc import ABC, abstractmethod
from typing import Any


class ElementaryFunctions(ABC):
    """An abstract base class for differentiable numbers that support the elementary functions."""

    # PUBLIC ABSTRACT METHODS

    @abstractmethod
    def cos(self) -> Any:
        """
        Calculate the cosine of the differentiable number.

        :return:    The cosine of the differentiable number.
        """
        pass

    @abstractmethod
    def exp(self) -> Any:
        """
        Calculate the exponential of the differentiable number.

        :return:    The exponential of the differentiable number.
        """
        pass

    @abstractmethod
    def ln(self) -> Any:
        """
        Calculate the natural logarithm of the differentiable number.

        :return:    The natural logarithm of the differentiable number.
        """
        pass

    @abstractmethod
    def powi(self, n: int) -> Any:
        """
        Raise the differentiable number to an integer power.

        :param n:   The (integer) exponent.
        :return:    The differentiable number raised to the specified power.
        """
        pass

    @abstractmethod
    def sin(self) -> Any:
        """
        Calculate the sine of the differentiable number.

        :return:    The sine of the differentiable number.
        """
        pass

    @abstractmethod
    def tan(self) -> Any:
        """
        Calculate the tangent of the differentiable number.

        :return:    The tangent of the differentiable number.
        """
        pass
