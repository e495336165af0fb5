class ImpSortError(Exception):
    """Raised when imports cannot be sorted, e.g. the source does not parse."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path
