"""
GFAWeaver v0.1.0

Sequence utility functions for GFAWeaver.

Provides the strand operations the handle graph needs to read a node
on its reverse strand.
"""

from typing import Iterator

_COMPLEMENT_TABLE = str.maketrans("ACGTacgt", "TGCAtgca")


def complement(sequence: str) -> str:
    """
    Complement each base of a sequence without reversing it.
    
    Args:
        sequence: DNA sequence string
        
    Returns:
        Complemented sequence (A<->T, C<->G, case preserved, other
        characters unchanged)
        
    Example:
        >>> complement("ATCGn")
        'TAGCn'
    """
    return sequence.translate(_COMPLEMENT_TABLE)


def reverse_complement(sequence: str) -> str:
    """
    Generate reverse complement of DNA sequence.
    
    Args:
        sequence: DNA sequence string
        
    Returns:
        Reverse complement sequence
        
    Example:
        >>> reverse_complement("ATCG")
        'CGAT'
        >>> reverse_complement("TCAAGG")
        'CCTTGA'
    """
    return complement(sequence)[::-1]


def iter_strand(sequence: str, is_reverse: bool) -> Iterator[str]:
    """Yield the bases of a sequence as read on the requested strand."""
    if is_reverse:
        yield from reverse_complement(sequence)
    else:
        yield from sequence


__all__ = [
    'complement',
    'reverse_complement',
    'iter_strand',
]
