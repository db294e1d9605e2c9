"""
errors.py
---------
Exceptions raised while loading FASTA and GFF input.

Field-level problems are raised as ``StructuralError``, ``LexicalError`` or
``CoordinateError``. The line parsers re-raise them wrapped in a
``LineError`` that names the line and the input, so ``str(error)`` reads
"Failed to parse line 2 of file.gff." while ``error.root_cause`` still gives
the original field-level exception.
"""


class GenomeIOError(Exception):
    """Base class for every error raised by this package."""

    @property
    def root_cause(self) -> BaseException:
        """Innermost exception of the ``__cause__`` chain."""
        cause: BaseException = self
        while cause.__cause__ is not None:
            cause = cause.__cause__
        return cause


class StreamError(GenomeIOError):
    """The input could not be opened or read."""

    def __init__(self, message: str, label: str):
        super().__init__(message)
        self.label = label


class StructuralError(GenomeIOError):
    """Wrong column count, body line before a header, or empty input."""


class LexicalError(GenomeIOError, ValueError):
    """Unknown symbol or token, or a malformed number."""


class CoordinateError(GenomeIOError, ValueError):
    """Start coordinate is zero or not below the end coordinate."""


class LineError(GenomeIOError):
    """A record could not be parsed; the field-level error is the cause."""

    def __init__(self, line_number: int, label: str):
        super().__init__(f'Failed to parse line {line_number} of {label}.')
        self.line_number = line_number
        self.label = label
