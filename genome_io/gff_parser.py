"""
gff_parser.py
-------------
Parse GFF annotation lines into Annotation objects.

Columns
-------
Every record is one line of exactly nine tab-separated columns:

  1 scaffold    4 start     7 strand      ('+' or '-')
  2 source      5 end       8 phase       ('0', '1', '2'; else absent)
  3 feature     6 score     9 attributes  (kept verbatim)

Supported features are exon, CDS, start_codon and stop_codon.

Location convention
-------------------
GFF uses 1-based, closed [start, end] intervals. Records are converted to
0-based half-open intervals: start is decremented, end is kept because a
1-based inclusive end equals the 0-based exclusive end.

Phase
-----
Phase only matters for CDS records, so any phase token other than 0, 1 or 2
(including '.') becomes None without raising.
"""

import re
from typing import Dict, Iterable, List, Optional

from .errors import (CoordinateError, LexicalError, LineError, StreamError,
                     StructuralError)
from .fasta_parser import iter_lines
from .models import Annotation, Feature, Phase, Strand

GFF_NUM_COLUMNS = 9

_UINT_RE = re.compile(r'[0-9]+')

FEATURE_TOKENS: Dict[str, Feature] = {
    'start_codon': Feature.START_CODON,
    'stop_codon':  Feature.STOP_CODON,
    'CDS':         Feature.CDS,
    'exon':        Feature.EXON,
}

STRAND_TOKENS: Dict[str, Strand] = {
    '+': Strand.POSITIVE,
    '-': Strand.NEGATIVE,
}

PHASE_TOKENS: Dict[str, Phase] = {
    '0': Phase.ZERO,
    '1': Phase.ONE,
    '2': Phase.TWO,
}


# ─────────────────────────────────────────────────────────────────────────────
# Column parsers
# ─────────────────────────────────────────────────────────────────────────────

def _parse_uint(token: str) -> Optional[int]:
    """Return the value of a plain decimal token, or None when malformed."""
    if not _UINT_RE.fullmatch(token):
        return None
    return int(token)


def _parse_feature(token: str) -> Feature:
    feature = FEATURE_TOKENS.get(token)
    if feature is None:
        raise LexicalError(f'unrecognized feature: {token}')
    return feature


def _parse_strand(token: str) -> Strand:
    strand = STRAND_TOKENS.get(token)
    if strand is None:
        raise LexicalError(
            f'Invalid strand, only +, - are valid. Got: {token}')
    return strand


def _parse_score(token: str) -> Optional[int]:
    if token == '.':
        return None
    score = _parse_uint(token)
    if score is None:
        raise LexicalError(
            f'Score is not a non-negative integer. Got: {token}')
    return score


def _parse_phase(token: str) -> Optional[Phase]:
    return PHASE_TOKENS.get(token)


def _parse_end(token: str) -> int:
    end = _parse_uint(token)
    if end is None:
        raise LexicalError(
            f'Feature end has to be a non-negative integer. Got: {token}')
    return end


def _parse_start(token: str) -> int:
    start = _parse_uint(token)
    if start is None:
        raise LexicalError(
            f'Feature start has to be a positive integer. Got: {token}')
    if start == 0:
        raise CoordinateError(
            'Feature start position is 0 but must be bigger or equal to 1.')
    return start - 1


def parse_gff_line(line: str) -> Annotation:
    """
    Parse a single GFF record (terminator already removed).

    Raises StructuralError, LexicalError or CoordinateError describing the
    first invalid column.
    """
    cols = line.split('\t')
    if len(cols) != GFF_NUM_COLUMNS:
        raise StructuralError(
            f'Expected {GFF_NUM_COLUMNS} tab separated columns, '
            f'got {len(cols)}.')

    (scaffold, source, feature, start, end,
     score, strand, phase, attributes) = cols

    feature_type = _parse_feature(feature)
    strand_type  = _parse_strand(strand)
    score_value  = _parse_score(score)
    phase_type   = _parse_phase(phase)
    end_index    = _parse_end(end)
    start_index  = _parse_start(start)

    return Annotation(
        scaffold   = scaffold,
        source     = source,
        feature    = feature_type,
        score      = score_value,
        strand     = strand_type,
        phase      = phase_type,
        start      = start_index,
        end        = end_index,
        attributes = attributes,
    )


# ─────────────────────────────────────────────────────────────────────────────
# Public entry points
# ─────────────────────────────────────────────────────────────────────────────

def parse_annotations(lines: Iterable[str], label: str) -> List[Annotation]:
    """
    Parse GFF lines into annotations, in input order.

    Parameters
    ----------
    lines : Any iterable of text lines, with or without terminators.
    label : Name of the input used in error messages (e.g. the file path).

    Raises
    ------
    StreamError : reading from ``lines`` failed.
    LineError   : naming the 1-based number of the first invalid line. The
                  column-level error is available as ``root_cause``.
    """
    annotations: List[Annotation] = []
    for lineno, line in iter_lines(lines, label):
        try:
            annotation = parse_gff_line(line)
        except (StructuralError, LexicalError, CoordinateError) as exc:
            raise LineError(lineno, label) from exc
        annotations.append(annotation)
    return annotations


def load_gff_file(
    filepath: str,
    encoding: str = 'utf-8',
    verbose: bool = True,
) -> List[Annotation]:
    """
    Load every annotation of a GFF file.

    Open and read failures are raised as StreamError; parse failures as
    documented for ``parse_annotations`` with ``filepath`` as the label.
    """
    try:
        fh = open(filepath, 'r', encoding=encoding, newline='\n')
    except OSError as exc:
        raise StreamError(f'Failed to open file {filepath}.', filepath) from exc

    with fh:
        annotations = parse_annotations(fh, filepath)

    if verbose:
        print(f'[gff_parser] Parsed {len(annotations)} annotation(s) from {filepath}')
    return annotations
