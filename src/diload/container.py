from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar, overload

from typing_extensions import Self

from diload._internal.identifiers import IdentifierNormalizer
from diload._internal.loader import DependencyLoader
from diload._internal.registry import AliasRecord, DependencyRecord, DependencyRegistry
from diload.exceptions import (
    ConflictAction,
    DILoadInvalidNameError,
    DILoadInvalidStateError,
    DILoadNotFoundError,
)
from diload.settings import ContainerSettings
from diload.types import CaseStyle, ContainerStatus, Factory, InjectionMode, OnLoaded

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger(__name__)


class Container:
    """Register named dependencies, load them once, then look them up by name.

    Names are normalized into identifiers, so ``foo-bar``, ``foo_bar`` and
    ``fooBar`` address the same dependency. A name may carry a namespace,
    ``lib:foo``, which is appended to the label (``fooLib`` in camel case).

    Registration happens while the container is ``NEW``. ``load`` then runs
    every factory exactly once, dependencies before dependents, and afterwards
    ``get`` returns the cached instances. Factories may be plain callables or
    return awaitables.
    """

    def __init__(
        self,
        case_style: CaseStyle = CaseStyle.CAMEL,
        *,
        argument_injection: bool = False,
    ) -> None:
        """Initialize an empty container.

        Args:
            case_style: Case style used to build identifiers, which are also
                the keys of the mapping passed to factories.
            argument_injection: Pass dependencies to factories as positional
                arguments in declared order instead of as a single mapping.

        Examples:
            .. code-block:: python

                container = Container()
                snake_container = Container(CaseStyle.SNAKE, argument_injection=True)

        """
        self._case_style = CaseStyle(case_style)
        self._argument_injection = argument_injection
        self._status = ContainerStatus.NEW
        self._normalizer = IdentifierNormalizer(self._case_style)
        self._registry = DependencyRegistry()
        self._loader = DependencyLoader(
            self._registry,
            self._normalizer,
            InjectionMode.ARGUMENTS if argument_injection else InjectionMode.OBJECT,
        )

    @classmethod
    def from_settings(cls, settings: ContainerSettings | None = None) -> Self:
        """Build a container from ``ContainerSettings``.

        Args:
            settings: Settings to use. Read from ``DILOAD_*`` environment
                variables when omitted.

        """
        if settings is None:
            settings = ContainerSettings()
        return cls(settings.case_style, argument_injection=settings.argument_injection)

    @property
    def status(self) -> ContainerStatus:
        return self._status

    @property
    def case_style(self) -> CaseStyle:
        return self._case_style

    @property
    def argument_injection(self) -> bool:
        return self._argument_injection

    def identifier(self, name: str) -> str:
        """Return the identifier ``name`` normalizes to in this container."""
        return self._normalizer.normalize(name)

    # region Registration Methods
    @overload
    def register(
        self,
        name: str,
        factory: Factory,
        dependencies: Sequence[str] | None = None,
        on_loaded: OnLoaded | None = None,
    ) -> None: ...

    @overload
    def register(self, name: str, factory: Factory, dependencies: OnLoaded) -> None: ...

    def register(
        self,
        name: str,
        factory: Factory,
        dependencies: Sequence[str] | OnLoaded | None = None,
        on_loaded: OnLoaded | None = None,
    ) -> None:
        """Register a factory under ``name``.

        Args:
            name: Dependency name, optionally namespaced (``namespace:name``).
            factory: Callable producing the instance. It receives the resolved
                dependencies as one mapping keyed by identifier, or as
                positional arguments with ``argument_injection``. It may
                return an awaitable.
            dependencies: Names of the dependencies to inject, in order. They
                do not need to be registered yet. A callable here is taken as
                ``on_loaded``.
            on_loaded: Callback invoked with the instance once it is loaded.

        Raises:
            DILoadInvalidNameError: If ``name`` is malformed.
            DILoadConflictError: If the identifier is already used by a
                dependency or an alias.
            DILoadInvalidStateError: If loading has already started.

        Examples:
            .. code-block:: python

                container.register("config", load_config)
                container.register("database", connect, ["config"])

        """
        if callable(dependencies):
            if on_loaded is not None:
                msg = "on_loaded was given twice."
                raise TypeError(msg)
            on_loaded, dependencies = dependencies, None
        if isinstance(dependencies, str):
            msg = f"Dependencies of {name} must be a sequence of names, not a string."
            raise TypeError(msg)
        if not callable(factory):
            msg = f"Factory for {name} must be callable, got {factory!r}."
            raise TypeError(msg)

        self._ensure_registrable("register dependency", name)
        identifier = self._normalizer.normalize(name)
        dependency_names = tuple(dependencies or ())
        logger.debug("registering %s with dependencies %s", name, list(dependency_names))

        self._registry.add_dependency(
            identifier,
            DependencyRecord(
                name=name,
                factory=factory,
                dependencies=dependency_names,
                on_loaded=on_loaded,
            ),
        )

    def factory(
        self,
        name: str,
        *,
        dependencies: Sequence[str] | None = None,
        on_loaded: OnLoaded | None = None,
    ) -> Callable[[F], F]:
        """Register the decorated callable as the factory of ``name``.

        Accepts the same arguments as ``register`` and returns the decorated
        callable unchanged.

        Examples:
            .. code-block:: python

                @container.factory("database", dependencies=["config"])
                async def connect(deps: dict[str, Any]) -> Database: ...

        """

        def decorator(decorated: F) -> F:
            self.register(name, decorated, dependencies, on_loaded)
            return decorated

        return decorator

    def set(self, name: str, instance: Any) -> None:
        """Register a ready-made ``instance`` under ``name``.

        The value is still loaded with every other dependency, it just has no
        dependencies of its own.

        Raises:
            DILoadInvalidNameError: If ``name`` is malformed.
            DILoadConflictError: If the identifier is already used.
            DILoadInvalidStateError: If loading has already started.

        """
        self._ensure_registrable("set constant value", name)
        logger.debug("adding static instance %s", name)
        self._registry.add_constant(self._normalizer.normalize(name), name, instance)

    def alias(self, name: str, alias: str) -> None:
        """Make ``alias`` another name for the dependency ``name``.

        ``name`` may be registered after the alias. Aliases of aliases are not
        supported.

        Raises:
            DILoadInvalidNameError: If either name is malformed.
            DILoadConflictError: If the alias identifier is already used.
            DILoadInvalidStateError: If loading has already started.

        """
        self._ensure_registrable("register alias", alias)
        logger.debug("registering alias from %s to %s", alias, name)
        identifier = self._normalizer.normalize(name)
        alias_identifier = self._normalizer.normalize(alias)
        self._registry.add_alias(
            alias_identifier,
            AliasRecord(identifier=identifier, name=name, alias=alias),
        )

    # endregion Registration Methods

    def get(self, name: str) -> Any:
        """Return the loaded instance of ``name``.

        Args:
            name: Dependency or alias name, in any form that normalizes to
                the registered identifier.

        Raises:
            DILoadInvalidStateError: If the dependencies have not been loaded.
            DILoadNotFoundError: If ``name`` is neither a dependency nor an alias.

        """
        if self._status is not ContainerStatus.LOADED:
            msg = "Attempt to get dependency before load"
            raise DILoadInvalidStateError(msg, self._status)

        identifier = self._normalizer.normalize(name)
        logger.debug("returning dependency %s", name)

        alias = self._registry.find_alias(identifier)
        record = self._registry.find(alias.identifier if alias is not None else identifier)
        if record is None:
            raise DILoadNotFoundError(name)
        return record.instance

    async def load(self) -> None:
        """Load every registered dependency.

        Factories run once each, after all of their dependencies. A failing
        factory stops the load and its exception propagates unchanged; the
        container is then ``FAILED`` and cannot be loaded again.

        Raises:
            DILoadMissingDependencyError: If a declared dependency is not registered.
            DILoadCycleDetectedError: If the dependency graph has a cycle.
            DILoadInvalidStateError: If ``load`` was already called.

        """
        if self._status is not ContainerStatus.NEW:
            msg = f"Unable to load dependencies, the container is already {self._status.value}"
            raise DILoadInvalidStateError(msg, self._status)

        self._status = ContainerStatus.LOADING
        logger.debug("start loading dependencies")
        try:
            await self._loader.load(self._registry.identifiers())
        except BaseException:
            self._status = ContainerStatus.FAILED
            raise
        logger.debug("finished loading dependencies")
        self._status = ContainerStatus.LOADED

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            identifier = self._normalizer.normalize(name)
        except DILoadInvalidNameError:
            return False
        return identifier in self._registry

    def _ensure_registrable(self, action: ConflictAction, name: str) -> None:
        if self._status is not ContainerStatus.NEW:
            msg = f"Unable to {action}, {name}, because the container is already {self._status.value}"
            raise DILoadInvalidStateError(msg, self._status)
