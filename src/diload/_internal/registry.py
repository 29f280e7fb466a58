from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from diload.exceptions import ConflictAction, DILoadConflictError
from diload.types import DependencyStatus, Factory, OnLoaded


@dataclass(kw_only=True)
class DependencyRecord:
    """Describe one registered dependency and its loading state.

    Records are owned by ``DependencyRegistry``. The loader mutates ``status``
    and ``instance`` in place while loading.
    """

    name: str
    """The name as written at registration, used in error messages."""
    factory: Factory
    """Callable producing the instance from the resolved dependencies."""
    dependencies: tuple[str, ...] = ()
    """Declared dependency names, unnormalized and in declared order."""
    on_loaded: OnLoaded | None = None
    """Optional callback invoked with the instance once loaded."""
    is_constant: bool = False
    """True for values registered with ``set``."""

    instance: Any = None
    status: DependencyStatus = DependencyStatus.NEW

    @classmethod
    def constant(cls, name: str, instance: Any) -> DependencyRecord:
        """Build a record whose factory ignores its arguments and returns ``instance``."""

        def _constant_factory(*_args: Any) -> Any:
            return instance

        return cls(name=name, factory=_constant_factory, is_constant=True)


@dataclass(frozen=True, slots=True)
class AliasRecord:
    """Map an alias identifier onto a dependency identifier."""

    identifier: str
    """Identifier of the aliased dependency."""
    name: str
    """Name of the aliased dependency as written."""
    alias: str
    """Name of the alias as written."""


class DependencyRegistry:
    """Store dependency and alias records keyed by identifier.

    Dependency identifiers and alias identifiers share one namespace: every
    insertion checks both maps and refuses duplicates. Dependencies keep
    registration order, which is the order of the top-level load.
    """

    def __init__(self) -> None:
        self._dependencies: dict[str, DependencyRecord] = {}
        self._aliases: dict[str, AliasRecord] = {}

    def add_dependency(self, identifier: str, record: DependencyRecord) -> None:
        """Add a dependency record.

        Args:
            identifier: Normalized identifier of ``record.name``.
            record: Record to insert.

        Raises:
            DILoadConflictError: If the identifier is already used.

        """
        action: ConflictAction = "set constant value" if record.is_constant else "register dependency"
        self._ensure_available(identifier, action=action, name=record.name)
        self._dependencies[identifier] = record

    def add_constant(self, identifier: str, name: str, instance: Any) -> None:
        self.add_dependency(identifier, DependencyRecord.constant(name, instance))

    def add_alias(self, alias_identifier: str, record: AliasRecord) -> None:
        """Add an alias record. The target does not need to be registered yet."""
        self._ensure_available(alias_identifier, action="register alias", name=record.alias)
        self._aliases[alias_identifier] = record

    def lookup(self, identifier: str) -> DependencyRecord:
        return self._dependencies[identifier]

    def find(self, identifier: str) -> DependencyRecord | None:
        return self._dependencies.get(identifier)

    def find_alias(self, identifier: str) -> AliasRecord | None:
        return self._aliases.get(identifier)

    def identifiers(self) -> Sequence[str]:
        """Return dependency identifiers in registration order."""
        return list(self._dependencies)

    def records(self) -> Iterator[tuple[str, DependencyRecord]]:
        yield from self._dependencies.items()

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._dependencies or identifier in self._aliases

    def __len__(self) -> int:
        return len(self._dependencies)

    def _ensure_available(self, identifier: str, *, action: ConflictAction, name: str) -> None:
        if (existing := self._dependencies.get(identifier)) is not None:
            raise DILoadConflictError(
                action,
                name,
                existing.name,
                conflicts_with_alias=False,
            )
        if (existing_alias := self._aliases.get(identifier)) is not None:
            raise DILoadConflictError(
                action,
                name,
                existing_alias.alias,
                conflicts_with_alias=True,
            )
