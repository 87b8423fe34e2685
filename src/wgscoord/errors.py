from __future__ import annotations


class CoordinateError(ValueError):
    """Base class for coordinate text errors."""


class CoordinateFormatError(CoordinateError):
    """Raised when no grammar accepts the input text."""

    def __init__(self, text: str, message: str = "Not valid latitude/longitude"):
        self.text = text
        super().__init__(f"{message}: {text!r}")


class UnrecognizedUnitError(CoordinateError):
    """Raised when an elevation carries a unit other than metres or feet."""

    def __init__(self, unit: str, text: str = ""):
        self.unit = unit
        self.text = text
        suffix = f" in {text!r}" if text else ""
        super().__init__(f"Invalid elevation units {unit!r}{suffix}")
