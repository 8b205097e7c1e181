"""Error types."""


class StringifyError(Exception):
    """Raised when the printer meets a node type it has no handler for."""

    def __init__(self, message: str, node_type: str | None = None):
        self.node_type = node_type
        super().__init__(message)


class TreeLoadError(Exception):
    """Raised when a serialized tree cannot be turned into nodes."""

    def __init__(self, message: str, path: str = "$"):
        self.path = path
        super().__init__(f"{message} (at {path})")
