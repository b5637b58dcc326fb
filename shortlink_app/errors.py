"""
Error taxonomy for the shortlink service.

Services raise these; the HTTP layer (shortlink_app.api.errors) maps them
to status codes and the response envelope.
"""


class ShortenerError(Exception):
    """Base class for all service errors"""


class ValidationError(ShortenerError):
    """Malformed or missing input. Never retried."""


class AliasExistsError(ShortenerError):
    """The alias is already taken by another record"""

    def __init__(self, alias: str):
        super().__init__(f"alias '{alias}' already exists")
        self.alias = alias


class NotFoundError(ShortenerError):
    """No record has the requested alias"""

    def __init__(self, alias: str):
        super().__init__(f"alias '{alias}' not found")
        self.alias = alias


class StorageError(ShortenerError):
    """Underlying persistence failure"""


class AliasSpaceExhaustedError(StorageError):
    """Every generated candidate collided within the retry bound"""

    def __init__(self, attempts: int):
        super().__init__(
            f"could not generate a unique alias after {attempts} attempts"
        )
        self.attempts = attempts
