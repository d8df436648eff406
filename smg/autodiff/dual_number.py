import numbers
import numpy as np
import operator

from typing import Any, Sequence, Union

from .sigmoid import Sigmoid


# TYPE ALIASES

Component = Union[np.float64, np.ndarray]
Scalar = Union[float, int, Sequence[float], np.ndarray]


# MAIN CLASS

class DualNumber(Sigmoid):
    """
    A dual number of the form x + eps * dx, where eps^2 = 0, used for forward-mode automatic differentiation.

    .. note::
        The real component x holds the value of a function at a point, and the dual component dx holds the
        derivative of the function at that point with respect to a single chosen variable. Seeding a number
        with dx = 1 and then evaluating an expression in terms of it yields the derivative of the expression
        in the dual component of the result.
    .. note::
        The components are stored as numpy float64s (or float64 arrays, to evaluate at many points at once),
        so that division by zero, logarithms of non-positive numbers, etc. produce IEEE infinities and NaNs
        rather than exceptions. Dual numbers are never modified in place: every operation makes a new one.
    """

    # Stop numpy from trying to broadcast its ufuncs over dual numbers, so that ndarray <op> DualNumber
    # falls through to our reflected operators.
    __array_ufunc__ = None

    # CONSTRUCTOR

    def __init__(self, x: Scalar = 0.0, dx: Scalar = 0.0):
        """
        Construct a dual number with the specified components.

        .. note::
            The two components are broadcast to a common shape, so that e.g. a scalar tangent paired with
            an array of values yields one tangent per value.

        :param x:   The real component (value) of the dual number.
        :param dx:  The dual component (tangent) of the dual number.
        """
        x, dx = np.broadcast_arrays(np.asarray(x, dtype=np.float64), np.asarray(dx, dtype=np.float64))
        self.x = DualNumber.__make_component(x)   # type: Component
        self.dx = DualNumber.__make_component(dx)  # type: Component

    # SPECIAL METHODS

    def __add__(self, rhs: Any) -> "DualNumber":
        """
        Add another dual number or a scalar to this one.

        :param rhs: The other dual number or scalar.
        :return:    The result of the operation.
        """
        with np.errstate(all="ignore"):
            if isinstance(rhs, DualNumber):
                return DualNumber(self.x + rhs.x, self.dx + rhs.dx)
            elif DualNumber.__is_scalar(rhs):
                return DualNumber(self.x + rhs, self.dx)
            else:
                return NotImplemented

    def __mul__(self, rhs: Any) -> "DualNumber":
        """
        Multiply this dual number by another one or by a scalar.

        :param rhs: The other dual number or scalar.
        :return:    The result of the operation.
        """
        with np.errstate(all="ignore"):
            if isinstance(rhs, DualNumber):
                return DualNumber(self.x * rhs.x, self.dx * rhs.x + self.x * rhs.dx)
            elif DualNumber.__is_scalar(rhs):
                return DualNumber(self.x * rhs, self.dx * rhs)
            else:
                return NotImplemented

    def __neg__(self) -> "DualNumber":
        """
        Calculate the negation of the dual number.

        :return:    The negation of the dual number.
        """
        return DualNumber(-self.x, -self.dx)

    def __pos__(self) -> "DualNumber":
        """
        Get a copy of the dual number.

        :return:    A copy of the dual number.
        """
        return self.copy()

    def __pow__(self, n: Any) -> "DualNumber":
        """
        Raise the dual number to an integer power.

        :param n:   The (integer) exponent.
        :return:    The dual number raised to the specified power.
        """
        if isinstance(n, numbers.Integral):
            return self.powi(n)
        else:
            return NotImplemented

    def __radd__(self, lhs: Any) -> "DualNumber":
        """
        Add this dual number to a scalar.

        :param lhs: The scalar.
        :return:    The result of the operation.
        """
        with np.errstate(all="ignore"):
            if DualNumber.__is_scalar(lhs):
                return DualNumber(lhs + self.x, self.dx)
            else:
                return NotImplemented

    def __repr__(self) -> str:
        """
        Get the formal string representation of the dual number.

        :return:    The formal string representation of the dual number.
        """
        return "DualNumber({}, {})".format(self.x, self.dx)

    def __rmul__(self, lhs: Any) -> "DualNumber":
        """
        Multiply a scalar by this dual number.

        :param lhs: The scalar.
        :return:    The result of the operation.
        """
        with np.errstate(all="ignore"):
            if DualNumber.__is_scalar(lhs):
                return DualNumber(lhs * self.x, lhs * self.dx)
            else:
                return NotImplemented

    def __rsub__(self, lhs: Any) -> "DualNumber":
        """
        Subtract this dual number from a scalar.

        :param lhs: The scalar.
        :return:    The result of the operation.
        """
        with np.errstate(all="ignore"):
            if DualNumber.__is_scalar(lhs):
                return DualNumber(lhs - self.x, -self.dx)
            else:
                return NotImplemented

    def __rtruediv__(self, lhs: Any) -> "DualNumber":
        """
        Divide a scalar by this dual number.

        .. note::
            The scalar is treated as a dual number with a zero tangent, so the quotient rule reduces to
            (c / x, -c * dx / x^2).

        :param lhs: The scalar.
        :return:    The result of the operation.
        """
        with np.errstate(all="ignore"):
            if DualNumber.__is_scalar(lhs):
                return DualNumber(lhs / self.x, -(lhs * self.dx) / (self.x * self.x))
            else:
                return NotImplemented

    def __str__(self) -> str:
        """
        Get the informal string representation of the dual number.

        :return:    The informal string representation of the dual number.
        """
        return "({}, {})".format(self.x, self.dx)

    def __sub__(self, rhs: Any) -> "DualNumber":
        """
        Subtract another dual number or a scalar from this one.

        :param rhs: The other dual number or scalar.
        :return:    The result of the operation.
        """
        with np.errstate(all="ignore"):
            if isinstance(rhs, DualNumber):
                return DualNumber(self.x - rhs.x, self.dx - rhs.dx)
            elif DualNumber.__is_scalar(rhs):
                return DualNumber(self.x - rhs, self.dx)
            else:
                return NotImplemented

    def __truediv__(self, rhs: Any) -> "DualNumber":
        """
        Divide this dual number by another one or by a scalar.

        :param rhs: The other dual number or scalar.
        :return:    The result of the operation.
        """
        with np.errstate(all="ignore"):
            if isinstance(rhs, DualNumber):
                return DualNumber(self.x / rhs.x, (self.dx * rhs.x - self.x * rhs.dx) / (rhs.x * rhs.x))
            elif DualNumber.__is_scalar(rhs):
                return DualNumber(self.x / rhs, self.dx / rhs)
            else:
                return NotImplemented

    # PUBLIC STATIC METHODS

    @staticmethod
    def close(lhs: "DualNumber", rhs: "DualNumber", tolerance: float = 1e-4) -> bool:
        """
        Check whether two dual numbers are approximately equal, up to a tolerance.

        .. note::
            If the dual numbers hold arrays, all of their elements must be approximately equal.

        :param lhs:         The first dual number.
        :param rhs:         The second dual number.
        :param tolerance:   The tolerance value.
        :return:            True, if the two dual numbers are approximately equal, or False otherwise.
        """
        return bool(np.all(np.abs(lhs.x - rhs.x) <= tolerance) and np.all(np.abs(lhs.dx - rhs.dx) <= tolerance))

    @staticmethod
    def constant(c: Scalar) -> "DualNumber":
        """
        Make a dual number that represents a constant (i.e. one whose tangent is zero).

        :param c:   The value of the constant.
        :return:    The dual number.
        """
        return DualNumber(c, np.zeros(np.shape(c)))

    @staticmethod
    def variable(x: Scalar) -> "DualNumber":
        """
        Make a dual number that represents the variable with respect to which we're differentiating.

        :param x:   The point (or points) at which the variable is to be evaluated.
        :return:    The dual number, with a tangent of one.
        """
        return DualNumber(x, np.ones(np.shape(x)))

    # PUBLIC METHODS

    def copy(self) -> "DualNumber":
        """
        Make a copy of the dual number.

        :return:    A copy of the dual number.
        """
        return DualNumber(self.x, self.dx)

    def cos(self) -> "DualNumber":
        """
        Calculate the cosine of the dual number.

        :return:    The cosine of the dual number.
        """
        with np.errstate(all="ignore"):
            return DualNumber(np.cos(self.x), -np.sin(self.x) * self.dx)

    def exp(self) -> "DualNumber":
        """
        Calculate the exponential of the dual number.

        :return:    The exponential of the dual number.
        """
        with np.errstate(all="ignore"):
            exp_x = np.exp(self.x)  # type: Component
            return DualNumber(exp_x, exp_x * self.dx)

    def inverse(self) -> "DualNumber":
        """
        Calculate the (multiplicative) inverse of the dual number.

        :return:    The inverse of the dual number.
        """
        with np.errstate(all="ignore"):
            return DualNumber(1 / self.x, -self.dx / self.x ** 2)

    def ln(self) -> "DualNumber":
        """
        Calculate the natural logarithm of the dual number.

        .. note::
            The logarithm of a non-positive number yields -inf or NaN, as per numpy.

        :return:    The natural logarithm of the dual number.
        """
        with np.errstate(all="ignore"):
            return DualNumber(np.log(self.x), self.dx / self.x)

    def powi(self, n: int) -> "DualNumber":
        """
        Raise the dual number to an integer power.

        :param n:           The (integer) exponent, which may be zero or negative.
        :return:            The dual number raised to the specified power.
        :raises TypeError:  If the exponent is not an integer.
        """
        n = operator.index(n)
        with np.errstate(all="ignore"):
            return DualNumber(self.x ** n, n * self.x ** (n - 1) * self.dx)

    def sin(self) -> "DualNumber":
        """
        Calculate the sine of the dual number.

        :return:    The sine of the dual number.
        """
        with np.errstate(all="ignore"):
            return DualNumber(np.sin(self.x), np.cos(self.x) * self.dx)

    def sqrt(self) -> "DualNumber":
        """
        Calculate the square root of the dual number.

        .. note::
            The square root of a negative number is NaN, and the tangent at zero is infinite.

        :return:    The square root of the dual number.
        """
        with np.errstate(all="ignore"):
            root_x = np.sqrt(self.x)  # type: Component
            return DualNumber(root_x, self.dx / (2 * root_x))

    def tan(self) -> "DualNumber":
        """
        Calculate the tangent of the dual number.

        .. note::
            The derivative of tan is 1 / cos^2 = tan^2 + 1, which lets us reuse the value we've already computed.

        :return:    The tangent of the dual number.
        """
        with np.errstate(all="ignore"):
            tan_x = np.tan(self.x)  # type: Component
            return DualNumber(tan_x, (tan_x * tan_x + 1) * self.dx)

    # PRIVATE STATIC METHODS

    @staticmethod
    def __is_scalar(value: Any) -> bool:
        """
        Determine whether or not a value can be treated as a (constant) scalar in mixed arithmetic.

        :param value:   The value.
        :return:        True, if the value is a real number or a numpy array, or False otherwise.
        """
        return isinstance(value, (numbers.Real, np.ndarray))

    @staticmethod
    def __make_component(value: Scalar) -> Component:
        """
        Convert a value to the form in which a dual number stores its components.

        :param value:   The value.
        :return:        A float64 scalar, if the value is a scalar, or a float64 array otherwise.
        """
        component = np.array(value, dtype=np.float64)  # type: np.ndarray
        return component[()] if component.ndim == 0 else component
