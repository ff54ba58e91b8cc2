class HuftextError(Exception):
    """Base class for every error raised by huftext."""


class EmptyInputError(HuftextError):
    """The source held no symbols, so no Huffman tree can be built."""

    def __init__(self, message: str = "Cannot compress an empty input: no symbols observed."):
        super().__init__(message)


class MalformedContainerError(HuftextError):
    """The container bytes do not describe a valid tree and payload."""


class ResourceError(HuftextError):
    """
    The source could not be read or the destination could not be written.

    Parameters:
    path (str): The file that failed.
    reason (Exception): The underlying OS or decoding error.
    """

    def __init__(self, path, reason: Exception):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")
