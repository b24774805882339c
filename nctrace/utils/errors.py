"""
Custom exception types for the nctrace decoding pipeline.
Unrecognized codes are not errors: they are logged and skipped by the decoder.
"""


class NCDecodeError(ValueError):
    """A source line could not be decoded."""

    def __init__(self, message: str):
        self.original_message = message
        self.line_index: int | None = None
        self.source_line: str | None = None
        super().__init__(message)

    def annotate(self, line_index: int, source_line: str) -> "NCDecodeError":
        """Attach the failing source line (zero-based index and raw text)."""
        self.line_index = line_index
        self.source_line = source_line
        return self

    def __str__(self):
        if self.line_index is None:
            return self.original_message
        return f"line {self.line_index + 1}: {self.original_message} (in {self.source_line!r})"


class MalformedValueError(NCDecodeError):
    """A recognized code carries a value that is not a valid number of its type."""

    def __init__(self, code: str, value: str, expected: str):
        self.code = code
        self.value = value
        self.expected = expected
        super().__init__(f"Malformed value for {code}: {value!r} is not a valid {expected}")


class MalformedTokenStreamError(NCDecodeError):
    """Tokens do not pair up into (code, value) pairs."""

    def __init__(self, segments: list[str]):
        self.segments = list(segments)
        super().__init__(f"Malformed token stream: {self.segments!r} does not form code/value pairs")
