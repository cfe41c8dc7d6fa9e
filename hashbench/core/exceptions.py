"""
Custom exception hierarchy for hashbench.

Every failure in a benchmark run is terminal: nothing is retried and
nothing is recovered locally. The CLI turns any HashbenchException into a
single diagnostic line on stderr and a non-zero exit status.
"""

from __future__ import annotations


class HashbenchException(Exception):
    """
    Base exception for all hashbench errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (file paths, values, etc.)
        exit_code: Exit code used by the CLI (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(HashbenchException, ValueError):
    """
    Invalid run configuration.

    Raised for an unknown time unit, output format or algorithm name, a
    negative random size, or bad values in a config file. Always raised
    before any hashing work begins.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Input Errors
# =============================================================================


class InputError(HashbenchException):
    """
    The benchmark input could not be acquired.

    Raised when a requested file is missing, unreadable or not a regular
    file, or when random data generation or the temporary file fails.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Hashing Errors
# =============================================================================


class HashingError(HashbenchException):
    """
    A digest computation failed.

    Raised when streaming a file for its digest fails part way, or when a
    single-use hash accumulator is fed a second time.
    """

    def __init__(
        self,
        message: str,
        *,
        algorithm: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if algorithm:
            ctx["algorithm"] = algorithm
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Output Errors
# =============================================================================


class FormatError(HashbenchException):
    """
    Results could not be rendered.

    Raised for an unrecognized output format at render time, or when the
    JSON/YAML serializer fails. Hashing has already completed when this is
    raised and the results are lost.
    """

    def __init__(
        self,
        message: str,
        *,
        output_format: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if output_format:
            ctx["format"] = output_format
        super().__init__(message, context=ctx, cause=cause)
