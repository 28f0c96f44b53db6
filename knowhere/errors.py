"""Exception types raised throughout the package."""

from __future__ import annotations


class KnowhereError(Exception):
    """Base error for all failures reported by the package."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    @classmethod
    def at(cls, message: str, func_name: str, file: str, line: int) -> "KnowhereError":
        """Build an error that records where it was raised.

        Only the final path component of ``file`` is kept.
        """
        filename = file[file.rfind("/") + 1:]
        return cls(f"Error in {func_name} at {filename}:{line}: {message}")


class InvalidMetricTypeError(KnowhereError):
    """The metric type name is not recognised."""


class InvalidParamError(KnowhereError):
    """A parameter given in a configuration is not allowed."""


class InvalidValueError(KnowhereError):
    """A parameter value in a configuration cannot be interpreted."""