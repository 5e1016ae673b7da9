class AocHelperError(Exception):
    """base exception for this package"""


class MissingCredentialError(AocHelperError):
    """no session token could be found in any of the configured sources"""


class InvalidCredentialError(AocHelperError):
    """the auth is expired/incorrect"""


class PuzzleNotAvailableError(AocHelperError):
    """trying to access input before the unlock, or for a day that never existed"""


class FetchFailedError(AocHelperError):
    """any other unsuccessful attempt at getting input data from the server"""

    def __init__(self, msg, status=None):
        super().__init__(msg)
        self.status = status


class CacheIOError(AocHelperError):
    """the local input cache could not be read or written"""
