import pytest

from edit_engine.runtime.config import (
    EngineSettings,
    get_settings,
    load_settings,
    override_settings,
    reset_settings,
)


def test_defaults_without_environment() -> None:
    settings = load_settings({})

    assert settings == EngineSettings()
    assert settings.strategy == "sequential"
    assert settings.cluster_threshold == 32


def test_environment_overrides() -> None:
    settings = load_settings(
        {
            "EDIT_ENGINE_LOG_LEVEL": "debug",
            "EDIT_ENGINE_LOG_JSON": "yes",
            "EDIT_ENGINE_DISABLE_CONSOLE": "1",
            "EDIT_ENGINE_STRATEGY": "Clustered",
            "EDIT_ENGINE_CLUSTER_THRESHOLD": "8",
        }
    )

    assert settings.log_level == "DEBUG"
    assert settings.log_json is True
    assert settings.console_output is False
    assert settings.strategy == "clustered"
    assert settings.cluster_threshold == 8


@pytest.mark.parametrize(
    "environ",
    [
        {"EDIT_ENGINE_STRATEGY": "fastest"},
        {"EDIT_ENGINE_LOG_LEVEL": "loud"},
        {"EDIT_ENGINE_CLUSTER_THRESHOLD": "many"},
        {"EDIT_ENGINE_CLUSTER_THRESHOLD": "0"},
    ],
)
def test_invalid_values_rejected(environ: dict[str, str]) -> None:
    with pytest.raises(ValueError):
        load_settings(environ)


def test_override_and_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EDIT_ENGINE_STRATEGY", raising=False)

    override_settings(strategy="clustered")
    assert get_settings().strategy == "clustered"

    reset_settings()
    assert get_settings().strategy == "sequential"
