"""
Exceptions for patchmate.

The engine itself never raises on malformed patch text; these are raised for
callers that hand it inconsistent inputs (missing baselines, bad strip levels).
"""


class PatchApplicationError(Exception):
    """
    Exception raised when a patch cannot be applied.

    Attributes:
        message -- explanation of the error
        details -- additional details about the error
    """

    def __init__(self, message, details=None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class MissingBaselineError(PatchApplicationError):
    """Raised when a file touched by a patch has no baseline text to apply against."""

    def __init__(self, path: str):
        super().__init__(f"No baseline text supplied for {path}", {"path": path})
        self.path = path
