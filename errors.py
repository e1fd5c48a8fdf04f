class RowEditError(Exception):
    """Base class for recoverable editor errors reported to the user."""


class StorageError(RowEditError):
    def __init__(self, path, reason=""):
        self.path = path
        self.reason = reason
        super().__init__(self._message())

    def _message(self) -> str:
        return f"{self.path}: {self.reason}" if self.reason else str(self.path)


class StorageUnreadable(StorageError):
    def _message(self) -> str:
        return f"Unable to read {super()._message()}"


class StorageUnwritable(StorageError):
    def _message(self) -> str:
        return f"Unable to write {super()._message()}"


class EmptyDataset(RowEditError):
    pass


class MalformedInput(RowEditError):
    pass


class IndexOutOfRange(RowEditError):
    def __init__(self, axis: str, index, limit: int):
        self.axis = axis
        self.index = index
        self.limit = limit
        if limit:
            msg = f"{axis.capitalize()} {index} out of range (1-{limit})"
        else:
            msg = f"{axis.capitalize()} {index} out of range (no {axis}s)"
        super().__init__(msg)


class PageError(RowEditError):
    pass


class PageUnderflow(PageError):
    def __init__(self, message="You've reached the top of the page."):
        super().__init__(message)


class PageOverflow(PageError):
    def __init__(self, message="You've reached the bottom of the page."):
        super().__init__(message)
