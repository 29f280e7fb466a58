from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol

from diload._internal.identifiers import IdentifierNormalizer
from diload._internal.registry import DependencyRecord, DependencyRegistry
from diload.exceptions import (
    PATH_SEPARATOR,
    DILoadCycleDetectedError,
    DILoadMissingDependencyError,
)
from diload.types import DependencyStatus, Factory, InjectionMode

logger = logging.getLogger(__name__)

ResolutionPath = tuple[str, ...]
"""Labels of the dependencies currently being loaded, outermost first."""


class ResolvedArguments(Protocol):
    """Resolved dependencies of one factory, ready to be passed to it."""

    def add(self, reference: str, instance: Any) -> None: ...

    def call(self, factory: Factory) -> Any: ...


@dataclass(slots=True)
class NamedArguments:
    """Pass dependencies as a single mapping keyed by the referencing identifier."""

    values: dict[str, Any] = field(default_factory=dict)

    def add(self, reference: str, instance: Any) -> None:
        self.values[reference] = instance

    def call(self, factory: Factory) -> Any:
        return factory(self.values)


@dataclass(slots=True)
class PositionalArguments:
    """Pass dependencies as positional arguments in declared order."""

    values: list[Any] = field(default_factory=list)

    def add(self, reference: str, instance: Any) -> None:  # noqa: ARG002
        self.values.append(instance)

    def call(self, factory: Factory) -> Any:
        return factory(*self.values)


_ARGUMENTS_BY_MODE: dict[InjectionMode, type[NamedArguments] | type[PositionalArguments]] = {
    InjectionMode.OBJECT: NamedArguments,
    InjectionMode.ARGUMENTS: PositionalArguments,
}


class DependencyLoader:
    """Load every registered dependency, dependencies first.

    Loading walks the declared dependency lists depth-first. Each record moves
    from ``NEW`` to ``LOADING`` while its own dependencies are loaded and to
    ``LOADED`` once its factory has completed, so a factory runs at most once
    and shared dependencies resolve to the same instance. Meeting a ``LOADING``
    record again means the graph has a cycle.

    The resolution path is passed down the recursion and only ever extended,
    so error messages always show the chain that led to the failure.
    """

    def __init__(
        self,
        registry: DependencyRegistry,
        normalizer: IdentifierNormalizer,
        injection_mode: InjectionMode = InjectionMode.OBJECT,
    ) -> None:
        self._registry = registry
        self._normalizer = normalizer
        self._arguments_type = _ARGUMENTS_BY_MODE[injection_mode]

    async def load(self, names: Iterable[str]) -> None:
        """Load ``names`` and, transitively, everything they depend on.

        Args:
            names: Registered identifiers, loaded in the given order.

        Raises:
            DILoadMissingDependencyError: If a declared dependency is not registered.
            DILoadCycleDetectedError: If a dependency requires itself, directly
                or through other dependencies.
            DILoadInvalidNameError: If a declared dependency name is malformed.

        """
        await self._resolve_all(((identifier, identifier) for identifier in names), ())

    async def _resolve_all(
        self,
        references: Iterable[tuple[str, str]],
        path: ResolutionPath,
    ) -> ResolvedArguments:
        resolved = self._arguments_type()
        for name, reference in references:
            logger.debug("loading dependency %s", name)
            identifier, label = self._redirect(name, reference)
            logger.debug("dependency identifier %s", identifier)

            record = self._registry.find(identifier)
            if record is None:
                raise DILoadMissingDependencyError(name, path)

            if record.status is DependencyStatus.LOADED:
                logger.debug("%s already loaded", identifier)
            elif record.status is DependencyStatus.LOADING:
                raise DILoadCycleDetectedError(label, path)
            else:
                await self._load_record(identifier, record, (*path, label))

            resolved.add(reference, record.instance)
        return resolved

    async def _load_record(
        self,
        identifier: str,
        record: DependencyRecord,
        path: ResolutionPath,
    ) -> None:
        record.status = DependencyStatus.LOADING
        logger.debug("loading sub-dependencies for %s", PATH_SEPARATOR.join(path))
        arguments = await self._resolve_all(
            ((name, self._normalizer.normalize(name)) for name in record.dependencies),
            path,
        )
        logger.debug("sub-dependencies loaded for %s", identifier)

        instance = arguments.call(record.factory)
        if inspect.isawaitable(instance):
            instance = await instance
        logger.debug("instance created for %s", identifier)

        record.instance = instance
        record.status = DependencyStatus.LOADED
        if record.on_loaded is not None:
            record.on_loaded(instance)

    def _redirect(self, name: str, reference: str) -> tuple[str, str]:
        """Return the identifier to load for ``reference`` and its path label."""
        alias = self._registry.find_alias(reference)
        if alias is None:
            return reference, reference
        return alias.identifier, f"{name} [{alias.identifier}]"
