"""Tests for building containers from ``ContainerSettings``."""

from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from diload.container import Container
from diload.settings import ContainerSettings
from diload.types import CaseStyle, InjectionMode


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DILOAD_CASE_STYLE", raising=False)
    monkeypatch.delenv("DILOAD_ARGUMENT_INJECTION", raising=False)


def test_defaults() -> None:
    settings = ContainerSettings()

    assert settings.case_style is CaseStyle.CAMEL
    assert settings.argument_injection is False
    assert settings.injection_mode is InjectionMode.OBJECT


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DILOAD_CASE_STYLE", "snake")
    monkeypatch.setenv("DILOAD_ARGUMENT_INJECTION", "true")

    settings = ContainerSettings()

    assert settings.case_style is CaseStyle.SNAKE
    assert settings.argument_injection is True
    assert settings.injection_mode is InjectionMode.ARGUMENTS


def test_rejects_unknown_case_style(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DILOAD_CASE_STYLE", "kebab")

    with pytest.raises(ValidationError):
        ContainerSettings()


def test_from_settings_uses_explicit_settings() -> None:
    container = Container.from_settings(
        ContainerSettings(case_style=CaseStyle.SNAKE, argument_injection=True),
    )

    assert container.case_style is CaseStyle.SNAKE
    assert container.argument_injection is True
    assert container.identifier("fooBar") == "foo_bar"


async def test_from_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DILOAD_ARGUMENT_INJECTION", "1")
    container = Container.from_settings()
    factory = Mock(return_value="bar-value")
    container.set("foo", "foo-value")
    container.register("bar", factory, ["foo"])

    await container.load()

    factory.assert_called_once_with("foo-value")


def test_container_accepts_case_style_value() -> None:
    assert Container("snake").case_style is CaseStyle.SNAKE  # type: ignore[arg-type]
