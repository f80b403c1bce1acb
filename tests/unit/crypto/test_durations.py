"""Tests for token lifetime parsing."""

import pytest

from rsajwt.crypto.durations import parse_duration


@pytest.mark.parametrize(
    ("value", "seconds"),
    [
        (3600, 3600),
        ("24h", 86400),
        ("1h", 3600),
        ("90m", 5400),
        ("30s", 30),
        ("2 days", 172800),
        ("1w", 604800),
        ("1.5h", 5400),
        ("2H", 7200),
        ("1y", 31557600),
        ("1500", 1),
        ("2500ms", 2),
        ("-10s", -10),
    ],
)
def test_parses(value: int | str, seconds: int) -> None:
    assert parse_duration(value) == seconds


@pytest.mark.parametrize("value", ["", "soon", "5 fortnights", "h", True])
def test_rejects(value: int | str) -> None:
    with pytest.raises(ValueError):
        parse_duration(value)
