import dataclasses
import logging

import pytest

import rootfind.config as config
from rootfind.config import SolverConfig, configure_logging


def test_default_configuration() -> None:
    cfg = SolverConfig()
    assert cfg.maximal_iteration_count == 100
    assert cfg.absolute_accuracy == 1e-6
    assert cfg.relative_accuracy == 1e-14
    assert cfg.function_value_accuracy == 1e-15


def test_configuration_is_immutable() -> None:
    cfg = SolverConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.absolute_accuracy = 1.0  # type: ignore[misc]


def test_zero_iterations_and_zero_accuracies_are_allowed() -> None:
    cfg = SolverConfig(
        maximal_iteration_count=0,
        absolute_accuracy=0.0,
        relative_accuracy=0.0,
        function_value_accuracy=0.0,
    )
    assert cfg.maximal_iteration_count == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"maximal_iteration_count": -1},
        {"maximal_iteration_count": 10.0},
        {"maximal_iteration_count": True},
        {"absolute_accuracy": -1e-6},
        {"relative_accuracy": float("nan")},
        {"function_value_accuracy": float("inf")},
    ],
)
def test_invalid_configuration_is_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)


def test_from_env_keeps_defaults_for_unset_variables() -> None:
    assert SolverConfig.from_env({}) == SolverConfig()


def test_from_env_reads_overrides() -> None:
    cfg = SolverConfig.from_env(
        {
            "ROOTFIND_MAX_ITERATIONS": "25",
            "ROOTFIND_ABSOLUTE_ACCURACY": "1e-9",
            "ROOTFIND_RELATIVE_ACCURACY": " ",
            "ROOTFIND_FUNCTION_VALUE_ACCURACY": "0",
        }
    )
    assert cfg == SolverConfig(
        maximal_iteration_count=25,
        absolute_accuracy=1e-9,
        function_value_accuracy=0.0,
    )


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROOTFIND_MAX_ITERATIONS", "7")
    assert SolverConfig.from_env().maximal_iteration_count == 7


def test_from_env_rejects_unparseable_values() -> None:
    with pytest.raises(ValueError, match="ROOTFIND_MAX_ITERATIONS"):
        SolverConfig.from_env({"ROOTFIND_MAX_ITERATIONS": "many"})


def test_configure_logging_reads_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}
    monkeypatch.setattr(config.logging, "basicConfig", lambda **kw: seen.update(kw))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configure_logging()

    assert seen["level"] == logging.DEBUG
    assert seen["format"] == config.LOG_FORMAT


def test_configure_logging_explicit_level_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}
    monkeypatch.setattr(config.logging, "basicConfig", lambda **kw: seen.update(kw))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    configure_logging("error")

    assert seen["level"] == logging.ERROR


def test_configure_logging_unknown_level_falls_back_to_warning(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    seen = {}
    monkeypatch.setattr(config.logging, "basicConfig", lambda **kw: seen.update(kw))
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    configure_logging("chatty")

    assert seen["level"] == logging.WARNING
