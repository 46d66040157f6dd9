import pytest

import config


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TERM_INPUT_MIN_DEGREE", "2")
    monkeypatch.setenv("TERM_INPUT_MAX_DEGREE", "40")
    monkeypatch.setenv("FACTOR_API_URL", "https://example.test/api/factor")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = config.load_settings()
    assert settings.min_degree == 2
    assert settings.max_degree == 40
    assert settings.factor_api_url == "https://example.test/api/factor"
    assert settings.log_level == "DEBUG"


def test_defaults(monkeypatch):
    monkeypatch.setattr(config, "_secret", lambda name: None)
    assert config.load_settings() == config.Settings()
    assert config.Settings().min_degree == 3


@pytest.mark.parametrize("raw", ["three", "2.5", "-1"])
def test_invalid_min_degree(monkeypatch, raw):
    monkeypatch.setenv("TERM_INPUT_MIN_DEGREE", raw)
    with pytest.raises(ValueError):
        config.load_settings()


def test_maximum_below_minimum(monkeypatch):
    monkeypatch.setenv("TERM_INPUT_MIN_DEGREE", "5")
    monkeypatch.setenv("TERM_INPUT_MAX_DEGREE", "4")
    with pytest.raises(ValueError):
        config.load_settings()


@pytest.mark.parametrize("raw", ["many", "-3"])
def test_invalid_max_degree(monkeypatch, raw):
    monkeypatch.setenv("TERM_INPUT_MIN_DEGREE", "3")
    monkeypatch.setenv("TERM_INPUT_MAX_DEGREE", raw)
    with pytest.raises(ValueError):
        config.load_settings()
