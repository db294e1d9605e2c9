"""
models.py
---------
Data classes and enumerations shared by the FASTA and GFF parsers.

Coordinates
-----------
Annotation coordinates are stored 0-based and half-open: ``start`` is the
index of the first symbol of the feature, ``end`` is one past the last
symbol. Feature ``ABC`` in scaffold ``XXABCYYY`` has start 2 and end 5.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .errors import CoordinateError


class Symbol(Enum):
    """
    One nucleotide base call. ``OTHER`` stands for gaps and misreads.

    The numeric encoding is published in ``SYMBOL_CODES`` and does not
    depend on the order the members are declared in.
    """
    OTHER    = 'N'
    ADENINE  = 'A'
    THYMINE  = 'T'
    CYTOSINE = 'C'
    GUANINE  = 'G'

    @property
    def code(self) -> int:
        return SYMBOL_CODES[self]

    def __int__(self) -> int:
        return SYMBOL_CODES[self]

    def __index__(self) -> int:
        return SYMBOL_CODES[self]


SYMBOL_CODES: Dict[Symbol, int] = {
    Symbol.ADENINE:  0,
    Symbol.THYMINE:  1,
    Symbol.CYTOSINE: 2,
    Symbol.GUANINE:  3,
    Symbol.OTHER:    4,
}


class Feature(Enum):
    """
    Region type of an annotated DNA feature. Features may overlap.
    """
    EXON        = 'exon'
    CDS         = 'CDS'           # protein coding sequence
    START_CODON = 'start_codon'
    STOP_CODON  = 'stop_codon'


class Strand(Enum):
    POSITIVE = '+'
    NEGATIVE = '-'


class Phase(Enum):
    """
    Offset of the first base of the first full codon relative to the
    feature start. Non-zero on CDS records that begin outside the scaffold.
    """
    ZERO = 0
    ONE  = 1
    TWO  = 2


@dataclass(frozen=True)
class Scaffold:
    """
    A continuous DNA sequence read from one FASTA record.

    Attributes
    ----------
    name     : str    Full header text after '>' (description included).
    sequence : tuple  Symbols in file order.
    """
    name:     str
    sequence: Tuple[Symbol, ...]

    def __len__(self) -> int:
        return len(self.sequence)


@dataclass(frozen=True)
class Annotation:
    """
    One GFF record describing a feature on a scaffold.

    Attributes
    ----------
    scaffold   : str   Scaffold identifier, not checked against loaded FASTA.
    source     : str   Origin of the record (organisation or software).
    feature    : Feature
    score      : int   Feature quality/confidence, None when absent.
    strand     : Strand
    phase      : Phase None when not applicable.
    start      : int   0-based inclusive start.
    end        : int   0-based exclusive end.
    attributes : str   Column 9 taken as is; needs further parsing by callers.
    """
    scaffold:   str
    source:     str
    feature:    Feature
    score:      Optional[int]
    strand:     Strand
    phase:      Optional[Phase]
    start:      int
    end:        int
    attributes: str

    def __post_init__(self):
        if self.start >= self.end:
            raise CoordinateError(
                f'Feature start index is greater or equal to end index. '
                f'{self.start} >= {self.end}')

    def __len__(self) -> int:
        return self.end - self.start
