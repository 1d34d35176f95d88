import pytest

from fortuna.stats import RunResult, format_size, format_time
from fortuna.utils import parse_seed, parse_size


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("1000", 1000),
        ("1_000_000", 1_000_000),
        ("16b", 16),
        ("1k", 1000),
        ("1kb", 1000),
        ("1ki", 1024),
        ("1KiB", 1024),
        ("1.5mi", 1572864),
        ("2g", 2_000_000_000),
        (None, None),
    ],
)
def test_parse_size(text, expected):
    assert parse_size(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-1", "1x", "1.5"])
def test_parse_size_invalid(text):
    with pytest.raises(ValueError):
        parse_size(text)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("-7", -7), ("0x10", 16), ("1_000", 1000), (None, None)],
)
def test_parse_seed(text, expected):
    assert parse_seed(text) == expected


@pytest.mark.parametrize("text", ["abc", "1.5", str(2**63), str(-(2**63) - 1)])
def test_parse_seed_invalid(text):
    with pytest.raises(ValueError):
        parse_seed(text)


def test_format_size():
    assert format_size(0) == "0 B"
    assert format_size(1500) == "2 kB"
    assert format_size(3_000_000) == "3 MB"


def test_format_time():
    assert format_time(-1) == "--"
    assert format_time(0.25) == "250ms"
    assert format_time(61) == "61s"
    assert format_time(150) == "2m30s"
    assert format_time(7200) == "2h"


def test_summary():
    result = RunResult(written=2_000_000, elapsed=2.0, seed=42)
    summary = result.format_summary()
    assert "wrote" in summary
    assert "2 MB" in summary
    assert "seed 42" in summary
    assert "crypto" not in summary
    result.crypto_time = 1.0
    assert "crypto 100%" in result.format_summary(verbose=1)
