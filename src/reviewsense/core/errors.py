"""Error types for ReviewSense."""


class ReviewSenseError(Exception):
    """Base class for ReviewSense errors."""


class InvalidInputError(ReviewSenseError, ValueError):
    """Raised at the service boundary when the caller passes malformed input.

    Degenerate text (empty or whitespace-only strings) is not an error; the
    core resolves it to zero-valued results.
    """
