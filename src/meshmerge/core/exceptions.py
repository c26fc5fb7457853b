class MergeError(Exception):
    """Base exception for merge failures."""


class UsageError(MergeError):
    """Raised when the record kind selection is missing or ambiguous."""


class InputFileError(MergeError):
    """Raised when an input mesh file cannot be opened."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Error opening file {self.path}")


class OutputFileError(MergeError):
    """Raised when the merged output file cannot be opened."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Error opening output file {self.path}")
