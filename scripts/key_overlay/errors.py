"""Exceptions raised by key_overlay."""


class OverlayError(Exception):
    """Base class for key_overlay errors."""


class ConfigurationError(OverlayError):
    """An option is missing, unparsable or out of range.

    Attributes:
        option: Command-line spelling of the offending option (e.g. "--key-width")
        reason: Human-readable description of the failure
    """

    def __init__(self, option: str, reason: str):
        super().__init__(f"{option}: {reason}")
        self.option = option
        self.reason = reason
