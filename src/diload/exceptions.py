from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from diload.types import ContainerStatus

ConflictAction = Literal["register dependency", "set constant value", "register alias"]
NameSegment = Literal["namespace", "name"]

PATH_SEPARATOR = " > "


class DILoadError(Exception):
    """Represent a base class for all diload-specific failures.

    Catch this type when you want to handle any diload error path without
    matching each concrete exception class individually. Exceptions raised by
    user factories are never wrapped and do not inherit from this class.
    """


class DILoadInvalidNameError(DILoadError):
    """Signal a dependency name that does not match the identifier grammar.

    Raised by every operation that accepts a name (``register``, ``set``,
    ``alias``, ``get``) and during ``load`` for declared dependency names.

    Typical fix is using names made of letters, digits, ``-``, ``$`` and ``_``
    that do not start with a digit or ``-``, optionally prefixed with a
    ``namespace:`` of the same form.
    """

    def __init__(self, name: str, segment: NameSegment) -> None:
        self.name = name
        self.segment = segment
        super().__init__(f"The {segment}, {name}, is not a valid identifier")


class DILoadConflictError(DILoadError):
    """Signal a name whose identifier is already taken.

    Raised by ``register``, ``set`` and ``alias`` when the normalized
    identifier is already used by a dependency or by an alias. Names that
    differ only in case style (``foo-bar`` and ``foo_bar``) share an
    identifier and therefore conflict.
    """

    def __init__(
        self,
        action: ConflictAction,
        name: str,
        conflicting_name: str,
        *,
        conflicts_with_alias: bool,
    ) -> None:
        self.action = action
        self.name = name
        self.conflicting_name = conflicting_name
        self.conflicts_with_alias = conflicts_with_alias
        target = "the alias" if conflicts_with_alias else "dependency"
        super().__init__(
            f"Unable to {action}, {name}, because it conflicts with {target}, {conflicting_name}",
        )


class DILoadResolutionError(DILoadError):
    """Base class for failures that depend on the resolution path.

    ``path`` holds the chain of in-flight dependency labels, from the
    top-level dependency down to the one whose declaration failed.
    """

    def __init__(self, message: str, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__(message)


class DILoadMissingDependencyError(DILoadResolutionError):
    """Signal a declared dependency that was never registered.

    Raised by ``load``. Typical fixes include registering the dependency,
    fixing a typo in the dependency list, or declaring an alias.
    """

    def __init__(self, name: str, path: Sequence[str]) -> None:
        self.name = name
        super().__init__(
            f"The dependency, {name}, is not registered. Path: {PATH_SEPARATOR.join(path)}",
            path,
        )


class DILoadCycleDetectedError(DILoadResolutionError):
    """Signal a dependency that is required while it is still being loaded.

    Raised by ``load``. ``name`` is the dependency as it was reached; when it
    was reached through an alias it reads ``alias [identifier]``.
    """

    def __init__(self, name: str, path: Sequence[str]) -> None:
        self.name = name
        super().__init__(
            f"Cycle detected in dependencies: {PATH_SEPARATOR.join((*path, name))}",
            path,
        )


class DILoadInvalidStateError(DILoadError):
    """Signal an operation that is not allowed in the current container status.

    Raised by ``get`` before ``load`` has completed, by a second ``load`` call,
    and by registrations after ``load`` has started.
    """

    def __init__(self, message: str, status: ContainerStatus) -> None:
        self.status = status
        super().__init__(message)


class DILoadNotFoundError(DILoadError):
    """Signal a ``get`` for a name that is neither a dependency nor an alias."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is not registered as a dependency or alias")
