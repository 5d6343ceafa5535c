"""Tests for batch conversion."""

from __future__ import annotations

import pytest

from toolxml import ConversionException, ErrorCode, clear_settings_cache, convert, convert_many, get_settings
from toolxml.conversion import BatchResult

GOOD = '{"response_type":"single_tool","single_tool":{"tool_use":{"tool":"list_files","path":"src"}}}'
TEXT = {"response_type": "text_only", "text_response": "all done"}
BROKEN = '{"response_type": "single_tool", "single_tool": '


@pytest.mark.parametrize("workers", [1, 3])
def test_malformed_middle_entry_is_isolated(workers: int) -> None:
    results = convert_many([GOOD, BROKEN, TEXT], max_workers=workers)

    assert len(results) == 3
    assert results[0].success
    assert not results[1].success
    assert results[1].code is ErrorCode.PARSE_ERROR
    assert results[2].success
    assert results[2].xml == "all done"


def test_results_match_single_conversion() -> None:
    inputs = [GOOD, TEXT, BROKEN]
    assert list(convert_many(inputs, max_workers=2)) == [convert(raw) for raw in inputs]


def test_threaded_preserves_order() -> None:
    inputs = [{"response_type": "text_only", "text_response": str(i)} for i in range(40)]
    results = convert_many(inputs, max_workers=8)

    assert [r.xml for r in results] == [str(i) for i in range(40)]


def test_aggregates() -> None:
    results = convert_many([GOOD, BROKEN, TEXT, BROKEN])

    assert len(results.successes) == 2
    assert len(results.failures) == 2
    assert results.success_rate == 0.5
    assert not results.all_ok
    assert [e.code for e in results.errors()] == [ErrorCode.PARSE_ERROR, ErrorCode.PARSE_ERROR]
    assert results.elapsed_ms >= 0


def test_empty_batch() -> None:
    results = convert_many([])

    assert len(results) == 0
    assert results.all_ok
    assert results.success_rate == 0.0
    results.raise_for_errors()


def test_accepts_generators() -> None:
    results = convert_many(TEXT for _ in range(3))
    assert results.all_ok and len(results) == 3


def test_sequence_protocol() -> None:
    results = convert_many([GOOD, TEXT])

    assert isinstance(results, BatchResult)
    assert results[-1].xml == "all done"
    assert [r.success for r in results[:1]] == [True]
    assert results.index(results[1]) == 1


def test_raise_for_errors_names_index() -> None:
    results = convert_many([GOOD, BROKEN])

    with pytest.raises(ConversionException, match=r"^inputs\[1\]: Failed to parse JSON string") as exc_info:
        results.raise_for_errors()

    assert exc_info.value.error.code is ErrorCode.PARSE_ERROR


def test_invalid_worker_count() -> None:
    with pytest.raises(ValueError, match="max_workers"):
        convert_many([GOOD], max_workers=0)


def test_workers_default_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TOOLXML_BATCH_MAX_WORKERS", "4")
    clear_settings_cache()
    results = convert_many([GOOD, TEXT, GOOD])

    assert get_settings().batch.max_workers == 4
    assert results.all_ok
