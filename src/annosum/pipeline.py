"""Line-level scanning and the fold-then-merge reduction over many lines."""
from __future__ import annotations

import concurrent.futures
import logging
from collections import deque
from itertools import islice
from typing import Deque, Iterable, Iterator, List

from .aggregate import AggregateResult
from .extraction.normalize import normalize_matches
from .extraction.tokenizer import iter_annotations

__all__ = ["DEFAULT_CHUNK_SIZE", "aggregate_lines", "iter_chunks", "scan_chunk", "scan_line"]

LOGGER = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 512


def scan_line(line: str) -> AggregateResult:
    """Aggregate the annotations found in a single line."""

    return AggregateResult.from_values(normalize_matches(iter_annotations(line)))


def scan_chunk(lines: Iterable[str]) -> AggregateResult:
    result = AggregateResult()
    for line in lines:
        result = result.merge(scan_line(line))
    return result


def iter_chunks(lines: Iterable[str], chunk_size: int) -> Iterator[List[str]]:
    if chunk_size < 1:
        raise ValueError("chunk_size must be positive")
    iterator = iter(lines)
    while True:
        chunk = list(islice(iterator, chunk_size))
        if not chunk:
            return
        yield chunk


def aggregate_lines(
    lines: Iterable[str],
    *,
    workers: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> AggregateResult:
    """Fold every line of ``lines`` into one :class:`AggregateResult`.

    With ``workers > 1`` the lines are split into chunks scanned on a thread
    pool; each worker returns its own partial result and the partials are
    merged by addition. At most ``workers * 2`` chunks are held in flight, so
    the input is streamed. The first error raised by any chunk aborts the run.
    """

    if workers <= 1:
        return scan_chunk(lines)

    LOGGER.debug("scanning with %d workers, chunk size %d", workers, chunk_size)
    window = workers * 2
    result = AggregateResult()
    pending: Deque[concurrent.futures.Future[AggregateResult]] = deque()
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        try:
            for chunk in iter_chunks(lines, chunk_size):
                if len(pending) >= window:
                    result = result.merge(pending.popleft().result())
                pending.append(executor.submit(scan_chunk, chunk))
            while pending:
                result = result.merge(pending.popleft().result())
        except BaseException:
            for future in pending:
                future.cancel()
            raise
    return result
