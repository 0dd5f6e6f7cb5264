"""Custom exceptions for oncotree2graph."""


class Oncotree2graphError(Exception):
    """Base exception for oncotree2graph operations."""


class FetchError(Oncotree2graphError):
    """Error during document fetching."""


class MalformedDocumentError(Oncotree2graphError):
    """Source document does not have the expected tree shape."""


class DuplicateCodeError(Oncotree2graphError):
    """Two distinct nodes share the same code."""

    def __init__(self, code: str, message: str | None = None) -> None:
        self.code = code
        super().__init__(message or f"Duplicate node code: {code!r}")


class GraphAssemblyError(Oncotree2graphError):
    """Edge list and node table cannot be joined into a graph."""


class NoColorMappedError(Oncotree2graphError):
    """Color name has no renderer mapping."""

    def __init__(self, color: str) -> None:
        self.color = color
        super().__init__(f"No color mapping for {color!r}")
