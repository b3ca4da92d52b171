import logging

import pytest

from mlsp import config


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, logging.WARNING),
        ("debug", logging.DEBUG),
        (" INFO ", logging.INFO),
        ("nonsense", logging.WARNING),
    ]
)
def test_log_level(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("MLSP_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("MLSP_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


@pytest.mark.parametrize("raw,expected", [(None, None), ("", None), ("abc", None), ("0", None), ("-5", None), ("999", None), ("1000", 1000), ("5000", 5000)])
def test_recursion_limit(monkeypatch, raw, expected):
    if raw is None:
        monkeypatch.delenv("MLSP_RECURSION_LIMIT", raising=False)
    else:
        monkeypatch.setenv("MLSP_RECURSION_LIMIT", raw)
    assert config.get_recursion_limit() == expected
