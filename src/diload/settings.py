from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from diload.types import CaseStyle, InjectionMode


class ContainerSettings(BaseSettings):
    """Container options, read from ``DILOAD_*`` environment variables.

    Examples:
        .. code-block:: bash

            export DILOAD_CASE_STYLE=snake
            export DILOAD_ARGUMENT_INJECTION=true

    """

    model_config = SettingsConfigDict(env_prefix="DILOAD_", frozen=True)

    case_style: CaseStyle = CaseStyle.CAMEL
    """Case style used to build identifiers from dependency names."""

    argument_injection: bool = False
    """Pass dependencies as positional arguments instead of a single mapping."""

    @property
    def injection_mode(self) -> InjectionMode:
        return InjectionMode.ARGUMENTS if self.argument_injection else InjectionMode.OBJECT
