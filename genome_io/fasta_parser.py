"""
fasta_parser.py
---------------
Parse FASTA text into Scaffold objects.

Input rules
-----------
  - A line starting with '>' opens a new scaffold. Everything after the
    marker is the scaffold name, description included.
  - Every other line holds sequence characters from the case-insensitive
    alphabet A, C, T, G, N. Any other character is an error.
  - Sequence lines before the first header are an error, and so is input
    without any header.
  - Line terminators ('\\n' or '\\r\\n') are dropped.

Parsing stops at the first error; no partial result is returned.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import LexicalError, LineError, StreamError, StructuralError
from .models import Scaffold, Symbol

HEADER_MARKER = '>'

SYMBOL_TABLE: Dict[str, Symbol] = {
    'A': Symbol.ADENINE,  'a': Symbol.ADENINE,
    'C': Symbol.CYTOSINE, 'c': Symbol.CYTOSINE,
    'T': Symbol.THYMINE,  't': Symbol.THYMINE,
    'G': Symbol.GUANINE,  'g': Symbol.GUANINE,
    'N': Symbol.OTHER,    'n': Symbol.OTHER,
}


def strip_terminator(line: str) -> str:
    """Remove a trailing '\\n' and the '\\r' preceding it, if any."""
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line


def iter_lines(lines: Iterable[str], label: str) -> Iterator[Tuple[int, str]]:
    """
    Yield (1-based line number, line without terminator) pairs.

    Read failures of the underlying stream are raised as StreamError naming
    ``label``.
    """
    iterator = iter(lines)
    lineno = 0
    while True:
        try:
            line = next(iterator)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as exc:
            raise StreamError(f'Failed to read {label}.', label) from exc
        lineno += 1
        yield lineno, strip_terminator(line)


class _ScaffoldBuilder:
    """Mutable staging area for the scaffold currently being read."""

    def __init__(self, name: str):
        self.name = name
        self.sequence: List[Symbol] = []

    def extend_from_str(self, seq: str) -> None:
        symbols = []
        for char in seq:
            symbol = SYMBOL_TABLE.get(char)
            if symbol is None:
                raise LexicalError(f'Encountered invalid symbol {char!r}.')
            symbols.append(symbol)
        self.sequence.extend(symbols)

    def build(self) -> Scaffold:
        # tuple() copies the symbols once; the list is dropped right after, so
        # peak memory briefly holds two copies of the current scaffold only.
        scaffold = Scaffold(self.name, tuple(self.sequence))
        self.sequence = []
        return scaffold


# ─────────────────────────────────────────────────────────────────────────────
# Public entry points
# ─────────────────────────────────────────────────────────────────────────────

def parse_sequences(lines: Iterable[str], label: str) -> List[Scaffold]:
    """
    Parse FASTA lines into scaffolds, in input order.

    Parameters
    ----------
    lines : Any iterable of text lines, with or without terminators.
    label : Name of the input used in error messages (e.g. the file path).

    Raises
    ------
    StreamError     : reading from ``lines`` failed.
    StructuralError : the input holds no header line.
    LineError       : a line could not be parsed; the cause is the
                      LexicalError or StructuralError describing why.
    """
    scaffolds: List[Scaffold] = []
    builder: Optional[_ScaffoldBuilder] = None

    for lineno, line in iter_lines(lines, label):
        if line.startswith(HEADER_MARKER):
            if builder is not None:
                scaffolds.append(builder.build())
            builder = _ScaffoldBuilder(line[len(HEADER_MARKER):])
            continue

        try:
            if builder is None:
                raise StructuralError(
                    f'Invalid FASTA input {label}: sequence data before the '
                    f'first header, no scaffold in progress.')
            builder.extend_from_str(line)
        except (LexicalError, StructuralError) as exc:
            raise LineError(lineno, label) from exc

    if builder is None:
        raise StructuralError(f'Empty FASTA input {label}.')
    scaffolds.append(builder.build())

    return scaffolds


def load_fasta(
    filepath: str,
    encoding: str = 'utf-8',
    verbose: bool = True,
) -> List[Scaffold]:
    """
    Load every scaffold of a FASTA file.

    Open and read failures are raised as StreamError; parse failures as
    documented for ``parse_sequences`` with ``filepath`` as the label.
    """
    try:
        fh = open(filepath, 'r', encoding=encoding, newline='\n')
    except OSError as exc:
        raise StreamError(f'Failed to open file {filepath}.', filepath) from exc

    with fh:
        scaffolds = parse_sequences(fh, filepath)

    if verbose:
        print(f'[fasta_parser] Loaded {len(scaffolds)} scaffold(s) from {filepath}')
    return scaffolds
