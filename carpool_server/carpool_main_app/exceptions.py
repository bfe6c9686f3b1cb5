"""Errors raised by the ride board services and mapped to HTTP responses by the views

Malformed input never reaches the services; the request serializers reject it first.
"""


class RideBoardError(Exception):
    """Base class for errors reported back to the client"""
    pass


class NotFoundError(RideBoardError):
    """Raised when the target record does not exist (or is no longer active)"""
    pass


class DuplicateError(RideBoardError):
    """Raised when a storage uniqueness constraint rejects a write"""
    pass


class DuplicateInterestError(DuplicateError):
    """Raised when the same person shows interest in a ride twice"""
    pass
