"""Exception hierarchy for fair-range.

All exceptions derive from FairRangeError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class FairRangeError(Exception):
    """Base exception for all fair-range errors."""


class EntropyUnavailableError(FairRangeError):
    """A random bit source cannot provide bytes.

    Raised when the entropy device is unreadable, a scripted sequence is
    exhausted, or both the primary and fallback sources fail. The sampler
    never retries this error; it propagates to the caller.
    """


class InvalidRangeError(FairRangeError, ValueError):
    """The requested range cannot be sampled.

    Raised when ``max < min``, when a bound is not an integer, or when a
    fixed source width is too narrow to cover the range.
    """


class RetryLimitExceededError(FairRangeError):
    """Rejection sampling hit the configured ``max_draws`` cap.

    Only raised when the caller imposes a cap; by default the sampler
    redraws until a value is accepted.
    """


class ConfigValidationError(FairRangeError):
    """Configuration field validation failed.

    Raised when per-call overrides contain unknown keys or attempt to
    override infrastructure fields.
    """
