"""Exception hierarchy for the khanij package."""

from __future__ import annotations


class KhanijError(Exception):
    """Base class for every error raised by khanij."""

    prefix = "khanij error"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"


class InvalidMineralError(KhanijError, ValueError):
    """A mineral description is invalid or unknown."""

    prefix = "invalid mineral"


class InvalidCompositionError(KhanijError, ValueError):
    """A chemical or physical composition is invalid."""

    prefix = "invalid composition"


class InvalidHardnessError(KhanijError, ValueError):
    """A hardness value lies outside its valid scale."""

    prefix = "invalid hardness"


class ComputationError(KhanijError, ArithmeticError):
    """A numerical computation could not be carried out."""

    prefix = "computation error"