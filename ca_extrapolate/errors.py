from __future__ import annotations


class CAError(Exception):
    """Base class for errors raised by ca_extrapolate."""


class ParseError(CAError, ValueError):
    def __init__(self, message: str, line_number: int | None = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class ConfigError(CAError, ValueError):
    pass
