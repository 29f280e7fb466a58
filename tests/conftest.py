"""Shared pytest fixtures for diload tests."""

import pytest

from diload.container import Container
from diload.types import CaseStyle


@pytest.fixture()
def container() -> Container:
    """Default container: camel case identifiers, object injection."""
    return Container()


@pytest.fixture()
def snake_container() -> Container:
    """Container rendering identifiers in snake case."""
    return Container(CaseStyle.SNAKE)


@pytest.fixture()
def argument_container() -> Container:
    """Container passing dependencies as positional arguments."""
    return Container(argument_injection=True)
