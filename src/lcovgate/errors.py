"""Centralised exception hierarchy for lcovgate."""

from __future__ import annotations

from lcovgate._format import format_number


class LcovGateError(Exception):
    """Base class for all custom lcovgate exceptions."""


class MissingInputError(LcovGateError):
    """LCOV report could not be located on disk."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"LCOV file not found: {path}")


class ConfigError(LcovGateError):
    """A configured coverage minimum is not a number."""


class ThresholdViolation(LcovGateError):
    """Computed coverage for *metric* fell below the configured minimum."""

    def __init__(self, metric: str, actual: float, required: float) -> None:
        self.metric = metric
        self.actual = actual
        self.required = required
        super().__init__(
            f"{metric.capitalize()} coverage {format_number(actual)}% "
            f"is below minimum {format_number(required)}%."
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThresholdViolation):
            return NotImplemented
        return (self.metric, self.actual, self.required) == (other.metric, other.actual, other.required)

    def __hash__(self) -> int:
        return hash((self.metric, self.actual, self.required))

    def __repr__(self) -> str:
        return f"ThresholdViolation(metric={self.metric!r}, actual={self.actual!r}, required={self.required!r})"


__all__ = [
    "ConfigError",
    "LcovGateError",
    "MissingInputError",
    "ThresholdViolation",
]
