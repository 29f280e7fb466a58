from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, TypeAlias, TypeVar

T = TypeVar("T")


class CaseStyle(str, Enum):
    """Defines how dependency names are rendered into identifiers."""

    CAMEL = "camel"
    """``foo-bar`` and ``foo_bar`` become ``fooBar``."""

    SNAKE = "snake"
    """``fooBar`` and ``foo-bar`` become ``foo_bar``."""


class InjectionMode(str, Enum):
    """Defines how resolved dependencies are passed to a factory."""

    OBJECT = "object"
    """A single mapping argument keyed by dependency identifier."""

    ARGUMENTS = "arguments"
    """Positional arguments in the declared dependency order."""


class ContainerStatus(str, Enum):
    """Lifecycle of a container."""

    NEW = "new"
    """Registrations are accepted; nothing has been loaded."""

    LOADING = "loading"
    """``load()`` is running."""

    LOADED = "loaded"
    """Every dependency has an instance; ``get()`` is available."""

    FAILED = "failed"
    """``load()`` raised; the container cannot be used any more."""


class DependencyStatus(str, Enum):
    """Lifecycle of a single registered dependency."""

    NEW = "new"
    """Known, but loading has not started."""

    LOADING = "loading"
    """The dependency or one of its sub-dependencies is being loaded."""

    LOADED = "loaded"
    """The factory has completed and the instance is cached."""


Factory: TypeAlias = Callable[..., Any] | Callable[..., Awaitable[Any]]
"""A callable producing a dependency instance, either directly or as an awaitable."""

OnLoaded: TypeAlias = Callable[[Any], None]
"""A callback invoked with the instance once a dependency has been loaded."""
