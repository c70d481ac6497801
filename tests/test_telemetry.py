from __future__ import annotations

import pytest

from doomish.runtime import telemetry


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="loud")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=telemetry.tl.Config(), preset="quiet")


def test_presets_build_and_reset_logger_cache() -> None:
    first = telemetry.get_logger("doomish.test")
    telemetry.configure(preset="quiet")
    try:
        assert telemetry.get_logger("doomish.test") is not first
    finally:
        telemetry.configure()


def test_span_reraises_and_collects_metadata() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("test::boom", component=True, metadata={"k": 1}) as handle:
            handle.add_metadata("extra", (1, 2))
            assert handle.metadata == {"k": "1", "extra": "(1, 2)"}
            assert handle.component_name == "test::boom"
            raise RuntimeError("boom")
