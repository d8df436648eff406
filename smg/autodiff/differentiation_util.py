import numpy as np

from typing import Any, Callable, Tuple

from .dual_number import DualNumber, Component, Scalar


class DifferentiationUtil:
    """Utility functions for differentiating single-variable functions using dual numbers."""

    # PUBLIC STATIC METHODS

    @staticmethod
    def derivative(f: Callable[[DualNumber], Any], x: Scalar) -> Component:
        """
        Calculate the derivative of a function at the specified point (or points).

        :param f:   The function, written in terms of the operations supported by dual numbers.
        :param x:   The point (or points) at which to differentiate the function.
        :return:    The derivative of the function at the specified point (or points).
        """
        return DifferentiationUtil.evaluate(f, x).dx

    @staticmethod
    def evaluate(f: Callable[[DualNumber], Any], x: Scalar) -> DualNumber:
        """
        Evaluate a function at the specified point (or points), tracking its derivative as we go.

        .. note::
            If the function ignores its argument and returns a plain number, it's treated as a constant,
            and so its derivative is zero.

        :param f:   The function, written in terms of the operations supported by dual numbers.
        :param x:   The point (or points) at which to evaluate the function.
        :return:    A dual number containing the value and derivative of the function at the point(s).
        """
        result = f(DualNumber.variable(x))
        if isinstance(result, DualNumber):
            return result
        else:
            return DualNumber.constant(np.broadcast_to(result, np.broadcast(result, x).shape))

    @staticmethod
    def value_and_derivative(f: Callable[[DualNumber], Any], x: Scalar) -> Tuple[Component, Component]:
        """
        Calculate both the value and the derivative of a function at the specified point (or points).

        :param f:   The function, written in terms of the operations supported by dual numbers.
        :param x:   The point (or points) at which to evaluate the function.
        :return:    A (value, derivative) tuple.
        """
        result = DifferentiationUtil.evaluate(f, x)  # type: DualNumber
        return result.x, result.dx
