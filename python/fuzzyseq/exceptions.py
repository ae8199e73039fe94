"""Exception hierarchy for fuzzyseq.

Every error is raised synchronously at the point of misuse. A distance that
exceeds a configured threshold is *not* an error: it is reported as ``-1``.
"""


class FuzzySeqError(Exception):
    """Base exception for all fuzzyseq errors."""


class ValidationError(FuzzySeqError, ValueError):
    """Raised when input validation fails (invalid operands or parameters)."""


class InvalidInputError(ValidationError):
    """Raised when an operand is ``None`` or cannot be compared."""


class InvalidInputTypeError(InvalidInputError, TypeError):
    """Raised when an operand has no sequence interface and no registered adapter."""


class InvalidArgumentError(ValidationError):
    """Raised for illegal configuration: negative threshold, missing converter, metric or locale."""


class UnequalLengthError(ValidationError):
    """Raised by Hamming distance when the operands differ in length."""


class AlgorithmError(FuzzySeqError, ValueError):
    """Raised when an unknown or unsupported algorithm is specified."""


__all__ = [
    "FuzzySeqError",
    "ValidationError",
    "InvalidInputError",
    "InvalidInputTypeError",
    "InvalidArgumentError",
    "UnequalLengthError",
    "AlgorithmError",
]
