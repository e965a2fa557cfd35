"""
Error types for the vector database core.

The core has exactly one error kind. Everything else (empty text, empty
store, zero limit) is a valid input with a well-defined result.
"""


class InvalidArgumentError(ValueError):
    """
    Raised when vectors of different dimensions meet.

    In normal operation this is unreachable: the store computes every
    vector with the same embedding provider. Treat it as an invariant
    check, not a user-facing error path.
    """
