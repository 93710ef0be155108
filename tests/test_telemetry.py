import pytest

from textgrid.runtime import telemetry


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("textgrid.tests") is telemetry.get_logger(
        "textgrid.tests"
    )


def test_span_reraises_failures() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("tests::boom", component=True, metadata={"case": 1}):
            raise RuntimeError("boom")


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("tests.event", level="chatty")
