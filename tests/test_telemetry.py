import pytest

from edit_engine import EditBuffer, TextDocument
from edit_engine.runtime import telemetry
from edit_engine.runtime.config import EngineSettings


@pytest.fixture(autouse=True)
def _restore_config():
    yield
    telemetry.configure()


def test_configure_rejects_config_and_settings() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), settings=EngineSettings())


def test_configure_from_settings_resets_logger_cache() -> None:
    before = telemetry.get_logger("edit_engine.test")

    telemetry.configure(settings=EngineSettings(log_level="ERROR"))

    assert telemetry.get_logger("edit_engine.test") is not before
    assert telemetry.get_logger("edit_engine.test") is telemetry.get_logger(
        "edit_engine.test"
    )


def test_span_reraises_and_tracks_metadata() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("test::span", component=True, metadata={"n": 1}) as span:
            span.add_metadata("stage", ("a", "b"))
            assert span.component_name == "test::span"
            assert span.metadata == {"n": "1", "stage": "('a', 'b')"}
            raise KeyError("boom")


def test_span_without_component() -> None:
    with telemetry.span("test::plain") as span:
        assert span.component_name is None


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("test.event", level="shout")


def test_apply_runs_under_quiet_configuration() -> None:
    telemetry.configure(
        settings=EngineSettings(log_level="ERROR", console_output=False)
    )
    document = TextDocument.from_text("abc")

    assert EditBuffer().insert(3, "d").apply(document) == 4
    assert document.get() == "abcd"
