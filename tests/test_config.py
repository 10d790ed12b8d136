import logging

from config.config import CALCULATOR_CONFIG, LOGGING_CONFIG, setup_logging, validate_config


def test_validate_config(caplog):
    with caplog.at_level(logging.INFO, logger="config.config"):
        validate_config()
    assert "Configuration validated successfully!" in caplog.text


def test_zero_division_policy():
    assert CALCULATOR_CONFIG["zero_division"] == "raise"


def test_setup_logging_uses_format(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    setup_logging(logging.DEBUG)
    assert calls == {"level": logging.DEBUG, "format": LOGGING_CONFIG["format"]}
