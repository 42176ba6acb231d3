from __future__ import annotations


class ComparisonError(ValueError):
    """Base class for inputs the comparator refuses to compute."""


class InvalidTerm(ComparisonError):
    """Term in years (or months) is not a positive integer."""


class InvalidRate(ComparisonError):
    """A percentage input is negative or not finite."""


class InvalidPrincipal(ComparisonError):
    """Home price, financed amount or monthly buyout is not positive."""
