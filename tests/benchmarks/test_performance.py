"""Performance benchmark suite for json-describer.

Description and diffing are linear in the number of top-level members; these
benchmarks keep an eye on that across three document sizes.

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

import pytest

pytest.importorskip("pytest_benchmark")

from json_describer import (  # noqa: E402
    classify,
    describe,
    describe_friendly,
    diff_counts,
    diff_keys,
)


class TestDescribePerformance:
    def test_10key_describe_friendly(self, benchmark, doc_10key):  # type: ignore[no-untyped-def]
        result = benchmark(describe_friendly, doc_10key)
        assert result.startswith("an object with")

    def test_1000key_describe(self, benchmark, doc_1000key):  # type: ignore[no-untyped-def]
        result = benchmark(describe, doc_1000key)
        assert result.member_count == 1000

    def test_10000key_describe(self, benchmark, doc_10000key):  # type: ignore[no-untyped-def]
        result = benchmark(describe, doc_10000key)
        assert result.member_count == 10_000

    def test_10000key_classify(self, benchmark, doc_10000key):  # type: ignore[no-untyped-def]
        result = benchmark(classify, doc_10000key)
        assert result == "object"


class TestDiffPerformance:
    def test_1000key_diff_keys(self, benchmark, pair_1000key):  # type: ignore[no-untyped-def]
        old, new = pair_1000key
        result = benchmark(diff_keys, old, new)
        assert len(result.deleted) == 100
        assert len(result.added) == 100
        # 4 of the 7 cycled kinds have a second spelling
        assert len(result.modified) == 58

    def test_10000key_diff_counts(self, benchmark, pair_10000key):  # type: ignore[no-untyped-def]
        old, new = pair_10000key
        result = benchmark(diff_counts, old, new)
        assert result.deleted == 1000
        assert result.added == 1000
        assert result.type_changed == 1000
        assert result.modified == 572
