from .arithmetic_operators import ArithmeticOperators
from .differentiation_util import DifferentiationUtil
from .dual_number import DualNumber
from .elementary_functions import ElementaryFunctions
from .sigmoid import Sigmoid, sigmoid
