"""
Exceptions raised by the suggestion ranking engine.

Only the load path raises. The ranking path never surfaces an error to the
host: an empty suggestion list is the only observable failure there.
"""


class SpellRankError(Exception):
    """Base class for engine errors."""
    pass


class UnsupportedLocale(SpellRankError, LookupError):
    """The locale tag does not map to known dictionary/frequency resources."""

    def __init__(self, locale: str) -> None:
        super().__init__(f"Unsupported locale: {locale!r}")
        self.locale = locale


class ResourceCorrupt(SpellRankError, ValueError):
    """A dictionary or frequency resource is missing or failed to deserialize."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidParameterUpdate(SpellRankError, ValueError):
    """A weight update did not carry exactly five numeric values."""
    pass
