"""Engine exceptions."""


class KlondikeError(Exception):
    """Base class for engine errors."""


class IllegalMoveError(KlondikeError):
    """A move or pile operation the current position does not allow."""
