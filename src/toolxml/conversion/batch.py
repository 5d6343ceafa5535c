"""Batch conversion over many independent responses.

Each entry is converted on its own; a failure never affects its neighbours.
Ordering is preserved whether entries run sequentially or on worker threads.

Example:
    >>> results = convert_many([resp_a, resp_b], max_workers=4)
    >>> print(f"Success rate: {results.success_rate:.0%}")
    >>> results.raise_for_errors()
"""

from __future__ import annotations

import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import overload

from .converter import ConversionResult, convert
from .inputs import RawInput
from ..foundation.errors import ConversionError, ConversionException, ErrorCode
from ..observability import get_logger

log = get_logger("toolxml.batch")


@dataclass(frozen=True, slots=True)
class BatchResult(Sequence[ConversionResult]):
    """Results of convert_many, one per input in input order, plus aggregate metrics."""
    items: tuple[ConversionResult, ...]
    elapsed_ms: float = 0.0

    @property
    def successes(self) -> list[ConversionResult]: return [r for r in self.items if r.success]

    @property
    def failures(self) -> list[ConversionResult]: return [r for r in self.items if not r.success]

    @property
    def success_rate(self) -> float: return len(self.successes) / len(self.items) if self.items else 0.0

    @property
    def all_ok(self) -> bool: return all(r.success for r in self.items)

    def errors(self) -> list[ConversionError]:
        """Failures as ConversionError values, in input order."""
        return [r.to_result().unwrap_err() for r in self.failures]

    def raise_for_errors(self) -> None:
        """Raise ConversionException for the first failed entry, naming its index."""
        for index, r in enumerate(self.items):
            if not r.success:
                raise ConversionException.create(f"inputs[{index}]: {r.error}", r.code or ErrorCode.UNKNOWN)

    @overload
    def __getitem__(self, index: int) -> ConversionResult: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[ConversionResult]: ...
    def __getitem__(self, index: int | slice) -> ConversionResult | Sequence[ConversionResult]:
        return self.items[index]

    def __len__(self) -> int: return len(self.items)


def _resolve_workers(max_workers: int | None) -> int:
    if max_workers is None:
        from toolxml.foundation.config import get_settings
        return get_settings().batch.max_workers
    if max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")
    return max_workers


def convert_many(inputs: Iterable[RawInput], *, max_workers: int | None = None) -> BatchResult:
    """Convert many responses independently.

    Args:
        inputs: Responses to convert (JSON text or parsed mappings)
        max_workers: Worker threads; None reads TOOLXML_BATCH_MAX_WORKERS (default 1, sequential)

    Returns:
        BatchResult with one ConversionResult per input, in input order.
    """
    batch = list(inputs)
    workers = min(_resolve_workers(max_workers), len(batch))
    start = time.perf_counter()

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="toolxml") as pool:
            items = tuple(pool.map(convert, batch))
    else:
        items = tuple(convert(raw) for raw in batch)

    result = BatchResult(items, (time.perf_counter() - start) * 1000)
    log.debug("batch converted", total=len(result), failed=len(result.failures),
              workers=max(workers, 1), elapsed_ms=round(result.elapsed_ms, 3))
    return result
