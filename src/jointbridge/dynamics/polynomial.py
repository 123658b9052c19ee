"""
Continuous piecewise-polynomial trajectories over dense vectors.

Thin wrapper around ``scipy.interpolate.PPoly`` exposing the queries the
converters need: value and derivative at a time, and the time span.
"""

from typing import Sequence

import numpy as np
from scipy.interpolate import PPoly


class PiecewisePolynomial:
    """
    Vector-valued piecewise polynomial in time.

    Coefficients follow the PPoly layout ``(order + 1, segments, rows)``,
    highest power first, local to each segment's start break.
    """

    def __init__(self, ppoly: PPoly) -> None:
        self._ppoly = ppoly

    @classmethod
    def first_order_hold(
        cls,
        breaks: Sequence[float],
        samples: Sequence[np.ndarray],
    ) -> "PiecewisePolynomial":
        """
        Piecewise-linear interpolation through ``samples`` at ``breaks``.

        Repeated break times produce zero-length segments with zero slope. A
        single sample yields a constant trajectory of zero duration. The
        result does not extrapolate: queries outside the break range hold the
        nearest end.

        Raises:
            ValueError: If the inputs are empty, differ in length, have
                inconsistent sample sizes or decreasing breaks
        """
        times = np.asarray(breaks, dtype=float).reshape(-1)
        if times.size == 0:
            raise ValueError("First order hold requires at least one sample")
        if len(samples) != times.size:
            raise ValueError(
                f"Number of breaks ({times.size}) does not match number of "
                f"samples ({len(samples)})"
            )
        values = np.stack([np.asarray(s, dtype=float).reshape(-1) for s in samples])

        if times.size == 1:
            times = np.repeat(times, 2)
            values = np.repeat(values, 2, axis=0)

        dt = np.diff(times)
        if np.any(dt < 0):
            raise ValueError("Breaks must be non-decreasing")

        slopes = np.zeros_like(values[1:])
        np.divide(
            np.diff(values, axis=0),
            dt[:, None],
            out=slopes,
            where=dt[:, None] > 0,
        )
        coefficients = np.stack([slopes, values[:-1]])
        return cls(PPoly(coefficients, times, extrapolate=False))

    @property
    def breaks(self) -> np.ndarray:
        return self._ppoly.x.copy()

    @property
    def rows(self) -> int:
        return int(self._ppoly.c.shape[2])

    @property
    def num_segments(self) -> int:
        return int(self._ppoly.c.shape[1])

    @property
    def order(self) -> int:
        return int(self._ppoly.c.shape[0]) - 1

    def start_time(self) -> float:
        return float(self._ppoly.x[0])

    def end_time(self) -> float:
        return float(self._ppoly.x[-1])

    def value(self, t: float) -> np.ndarray:
        """Evaluate the trajectory at ``t``, clamped to the break range."""
        return np.asarray(self._ppoly(self._clamp(t)), dtype=float)

    def eval_derivative(self, t: float, derivative_order: int = 1) -> np.ndarray:
        """Evaluate the ``derivative_order``-th time derivative at clamped ``t``."""
        return np.asarray(self._ppoly(self._clamp(t), nu=derivative_order), dtype=float)

    def _clamp(self, t: float) -> float:
        return float(np.clip(t, self.start_time(), self.end_time()))

    def derivative(self, derivative_order: int = 1) -> "PiecewisePolynomial":
        return PiecewisePolynomial(self._ppoly.derivative(derivative_order))

    def __repr__(self) -> str:
        return (
            f"PiecewisePolynomial(rows={self.rows}, segments={self.num_segments}, "
            f"span=[{self.start_time():.3f}, {self.end_time():.3f}])"
        )
