# orphanage_care/core/errors.py
"""Domain errors raised by the record store and the directories.

Routers translate these into HTTP responses; nothing in the data layer
knows about status codes.
"""


class DirectoryError(Exception):
    pass


class ValidationError(DirectoryError):
    """A required field is missing or a value cannot be coerced."""


class MalformedId(ValidationError):
    pass


class DuplicateKey(DirectoryError):
    pass


class AlreadyRegistered(DirectoryError):
    pass


class NotFound(DirectoryError):
    pass


class BadCredentials(DirectoryError):
    pass
