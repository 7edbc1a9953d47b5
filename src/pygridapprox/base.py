"""Abstract capabilities of one-dimensional function approximations."""

from __future__ import annotations

import abc


class FunctionApproximation(abc.ABC):
    """Approximation of a real function of one variable on a closed interval."""

    @property
    @abc.abstractmethod
    def left_bound(self) -> float:
        """Left end of the domain."""

    @property
    @abc.abstractmethod
    def right_bound(self) -> float:
        """Right end of the domain."""

    @abc.abstractmethod
    def get_value(self, x: float) -> float:
        """Value of the approximation at ``x`` inside the domain."""


class MonotonicFunctionApproximation(FunctionApproximation):
    """Approximation of a strictly monotonic function, invertible on its range.

    Implementations must produce strictly monotonic cell polynomials so
    that :meth:`get_argument` has a unique answer.  The inverse lookup is
    done per cell: closed form for linear cells, a bounded root search
    inside the cell for cubic ones.
    """

    @property
    @abc.abstractmethod
    def left_value(self) -> float:
        """Value at ``left_bound``."""

    @property
    @abc.abstractmethod
    def right_value(self) -> float:
        """Value at ``right_bound``."""

    @property
    @abc.abstractmethod
    def min_value(self) -> float:
        """Smallest value over the domain."""

    @property
    @abc.abstractmethod
    def max_value(self) -> float:
        """Largest value over the domain."""

    @abc.abstractmethod
    def get_argument(self, y: float) -> float:
        """Argument whose value is ``y`` (the inverse function)."""
