from abc import ABC, abstractmethod
from typing import Any


class ArithmeticOperators(ABC):
    """
    An abstract base class for differentiable numbers that support the basic arithmetic operators.

    .. note::
        Each binary operator must accept either another differentiable number or a plain real scalar,
        which is treated as a constant (i.e. as having a zero tangent).
    """

    # PUBLIC ABSTRACT METHODS

    @abstractmethod
    def __add__(self, rhs: Any) -> Any:
        """
        Add another differentiable number or a scalar to this one.

        :param rhs: The other operand.
        :return:    The result of the operation.
        """
        pass

    @abstractmethod
    def __mul__(self, rhs: Any) -> Any:
        """
        Multiply this differentiable number by another one or by a scalar.

        :param rhs: The other operand.
        :return:    The result of the operation.
        """
        pass

    @abstractmethod
    def __neg__(self) -> Any:
        """
        Calculate the negation of the differentiable number.

        :return:    The negation of the differentiable number.
        """
        pass

    @abstractmethod
    def __rtruediv__(self, lhs: Any) -> Any:
        """
        Divide a scalar by this differentiable number.

        :param lhs: The scalar numerator.
        :return:    The result of the operation.
        """
        pass

    @abstractmethod
    def __sub__(self, rhs: Any) -> Any:
        """
        Subtract another differentiable number or a scalar from this one.

        :param rhs: The other operand.
        :return:    The result of the operation.
        """
        pass

    @abstractmethod
    def __truediv__(self, rhs: Any) -> Any:
        """
        Divide this differentiable number by another one or by a scalar.

        :param rhs: The other operand.
        :return:    The result of the operation.
        """
        pass
