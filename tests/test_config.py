from netlayer import config


def test_get_bool_parses_truthy_values(monkeypatch):
    monkeypatch.setenv("NETLAYER_TEST_FLAG", "Yes")
    assert config._get_bool("NETLAYER_TEST_FLAG") is True

    monkeypatch.setenv("NETLAYER_TEST_FLAG", "off")
    assert config._get_bool("NETLAYER_TEST_FLAG", default=True) is False

    monkeypatch.delenv("NETLAYER_TEST_FLAG")
    assert config._get_bool("NETLAYER_TEST_FLAG", default=True) is True


def test_get_float_falls_back_on_invalid_values(monkeypatch, caplog):
    monkeypatch.setenv("NETLAYER_TEST_TIMEOUT", "2.5")
    assert config._get_float("NETLAYER_TEST_TIMEOUT", 60.0) == 2.5

    monkeypatch.setenv("NETLAYER_TEST_TIMEOUT", "soon")
    assert config._get_float("NETLAYER_TEST_TIMEOUT", 60.0) == 60.0
    assert "NETLAYER_TEST_TIMEOUT" in caplog.text

    monkeypatch.setenv("NETLAYER_TEST_TIMEOUT", " ")
    assert config._get_float("NETLAYER_TEST_TIMEOUT", 60.0) == 60.0


def test_default_settings():
    assert config.settings.default_timeout > 0
    assert config.settings.reachability_port > 0
    assert isinstance(config.settings, config.Settings)
