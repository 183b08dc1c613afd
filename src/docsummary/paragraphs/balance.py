"""
Partition an ordered run of units into a fixed number of near-equal groups.
"""

from typing import List, Sequence

from .lengths import require_positive_count


def balance_units(units: Sequence[str], n: int) -> List[List[str]]:
    """
    Split units into exactly n contiguous chunks whose sizes differ by at most one.

    The first ``len(units) % n`` chunks take the extra unit, so leading
    paragraphs are never shorter than trailing ones. With no units a single
    empty chunk is returned.

    Raises:
        InvalidArgumentError: if n < 1
    """
    require_positive_count(n)
    total = len(units)
    if total == 0:
        return [[] for _ in range(max(1, min(n, total)))]

    base, remainder = divmod(total, n)
    chunks: List[List[str]] = []
    idx = 0
    for i in range(n):
        take = base + (1 if i < remainder else 0)
        chunks.append(list(units[idx : idx + take]))
        idx += take
    return chunks


def join_chunk(chunk: Sequence[str]) -> str:
    return " ".join(chunk).strip()
