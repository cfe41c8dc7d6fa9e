"""
Unit tests for result formatting.

Tests unit conversion, JSON/YAML rendering, the plain single-algorithm
form and quote escaping.
"""

import json
import re
import sys

import pytest
import yaml

import hashbench.presenters.formatting  # noqa: F401 - ensure module is in sys.modules
from hashbench.core.exceptions import FormatError
from hashbench.core.models.run import (
    MEGABYTE,
    HashResult,
    OutputFormat,
    RunConfiguration,
    TimeUnit,
)
from hashbench.presenters.formatting import (
    convert_duration,
    escape_quotes,
    render_outcome,
    render_results,
    render_single,
    throughput_mb_per_second,
    to_results,
)
from hashbench.services.benchmark import BenchmarkOutcome, Measurement, SingleMeasurement

formatting_module = sys.modules["hashbench.presenters.formatting"]


class TestConvertDuration:
    """Tests for convert_duration()."""

    def test_five_million_ns_is_five_ms(self):
        assert convert_duration(5_000_000, TimeUnit.MILLISECOND) == 5

    def test_truncates_instead_of_rounding(self):
        assert convert_duration(1_999_999, TimeUnit.MILLISECOND) == 1
        assert convert_duration(999, TimeUnit.MICROSECOND) == 0

    @pytest.mark.parametrize(
        ("unit", "expected"),
        [
            (TimeUnit.NANOSECOND, 2_500_000_123),
            (TimeUnit.MICROSECOND, 2_500_000),
            (TimeUnit.MILLISECOND, 2_500),
            (TimeUnit.SECOND, 2),
        ],
    )
    def test_each_unit(self, unit, expected):
        assert convert_duration(2_500_000_123, unit) == expected


class TestThroughput:
    def test_megabytes_per_second(self):
        assert throughput_mb_per_second(10 * MEGABYTE, 2.0) == 5.0

    def test_zero_elapsed(self):
        assert throughput_mb_per_second(MEGABYTE, 0.0) == float("inf")
        assert throughput_mb_per_second(0, 0.0) == 0.0


class TestToResults:
    def test_keeps_order_and_converts(self):
        measurements = [
            Measurement(algorithm="md5", bytes_ns=3_000_000, file_ns=7_500_000),
            Measurement(algorithm="sha1", bytes_ns=None, file_ns=1_000_000),
        ]
        results = to_results(measurements, TimeUnit.MILLISECOND)
        assert [r.algorithm for r in results] == ["md5", "sha1"]
        assert results[0].bytes_elapsed == 3
        assert results[0].file_elapsed == 7
        assert results[1].bytes_elapsed is None


class TestRenderResults:
    """Tests for render_results()."""

    @pytest.fixture
    def results(self):
        return [
            HashResult(algorithm="md5", bytes_elapsed=12, file_elapsed=34),
            HashResult(algorithm="sha3_256", bytes_elapsed=0, file_elapsed=5),
        ]

    def test_json_is_compact_array(self, results):
        text = render_results(results, OutputFormat.JSON)
        assert text == (
            '[{"alg":"md5","bytes":12,"file":34},{"alg":"sha3_256","bytes":0,"file":5}]'
        )
        assert json.loads(text)[1]["alg"] == "sha3_256"

    def test_yaml_is_block_list(self, results):
        text = render_results(results, OutputFormat.YAML)
        assert text.splitlines()[:3] == ["- alg: md5", "  bytes: 12", "  file: 34"]
        assert yaml.safe_load(text) == [
            {"alg": "md5", "bytes": 12, "file": 34},
            {"alg": "sha3_256", "bytes": 0, "file": 5},
        ]

    def test_result_without_bytes_timing(self):
        text = render_results([HashResult(algorithm="md5", file_elapsed=1)], OutputFormat.JSON)
        assert json.loads(text) == [{"alg": "md5", "file": 1}]

    def test_empty_results(self):
        assert render_results([], OutputFormat.JSON) == "[]"

    def test_user_format_is_not_a_table_format(self, results):
        with pytest.raises(FormatError):
            render_results(results, OutputFormat.USER)

    def test_serializer_failure_raises_format_error(self, results, monkeypatch):
        def broken_dumps(*args, **kwargs):
            raise TypeError("not serializable")

        monkeypatch.setattr(formatting_module.json, "dumps", broken_dumps)
        with pytest.raises(FormatError) as exc_info:
            render_results(results, OutputFormat.JSON)
        assert "failed to encode output" in exc_info.value.message


class TestRenderSingle:
    def test_digest_line_and_stats_line(self):
        measurement = SingleMeasurement(
            algorithm="sha3_256",
            path="/data/file.bin",
            size=2 * MEGABYTE,
            digest=bytes.fromhex("ab" * 32),
            elapsed_ns=500_000_000,
        )
        lines = render_single(measurement).splitlines()
        assert lines[0] == f"{'ab' * 32} /data/file.bin"
        assert lines[1] == "time: 0.500000s, throughput: 4.00 MB/s"


class TestEscapeQuotes:
    def test_escapes_every_quote(self):
        assert escape_quotes('[{"alg":"md5"}]') == '[{\\"alg\\":\\"md5\\"}]'

    def test_text_without_quotes_unchanged(self):
        assert escape_quotes("- alg: md5") == "- alg: md5"


class TestRenderOutcome:
    """Tests for render_outcome()."""

    def _outcome(self, **config_kwargs):
        config = RunConfiguration(**config_kwargs)
        return BenchmarkOutcome(
            config=config,
            measurements=(Measurement(algorithm="md5", bytes_ns=2_000, file_ns=9_000),),
        )

    def test_json_in_microseconds(self):
        outcome = self._outcome(output_format=OutputFormat.JSON, time_unit=TimeUnit.MICROSECOND)
        assert render_outcome(outcome) == '[{"alg":"md5","bytes":2,"file":9}]'

    def test_escape_applied_after_serialization(self):
        outcome = self._outcome(output_format=OutputFormat.JSON, escape_quotes=True)
        assert render_outcome(outcome) == '[{\\"alg\\":\\"md5\\",\\"bytes\\":2000,\\"file\\":9000}]'

    def test_user_format(self):
        config = RunConfiguration(output_format=OutputFormat.USER, selected_algorithm="md5")
        outcome = BenchmarkOutcome(
            config=config,
            single=SingleMeasurement(
                algorithm="md5", path="in.bin", size=0, digest=b"\x01\x02", elapsed_ns=10
            ),
        )
        text = render_outcome(outcome)
        assert re.match(r"^0102 in\.bin\ntime: [0-9.]+s, throughput: [0-9.]+ MB/s$", text)

    def test_user_format_without_measurement(self):
        outcome = BenchmarkOutcome(config=RunConfiguration(output_format=OutputFormat.USER))
        with pytest.raises(FormatError):
            render_outcome(outcome)
