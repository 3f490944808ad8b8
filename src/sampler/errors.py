"""Errors raised while producing a sample."""


class SampleError(Exception):
    """A sample element could not be rendered."""

    kind = "sample"

    def __init__(self, url: str, selector: str = "", message: str = ""):
        self.url = url
        self.selector = selector
        super().__init__(message or self._default_message())

    def _default_message(self) -> str:
        return f"cannot render {self.target}"

    @property
    def target(self) -> str:
        return f"{self.url}#{self.selector}" if self.selector else self.url

    def to_dict(self) -> dict:
        return {"kind": self.kind, "url": self.url, "selector": self.selector, "error": str(self)}


class RetrievalError(SampleError):
    """The file behind a sample could not be fetched."""

    kind = "retrieval"

    def _default_message(self) -> str:
        return f"failed to get file: {self.url}"


class EmptySampleError(SampleError):
    """A selector matched no lines."""

    kind = "empty-sample"

    def _default_message(self) -> str:
        if self.selector:
            return f"no lines selected by '{self.selector}' in {self.url}"
        return f"no lines in {self.url}"
