from diload.container import Container
from diload.exceptions import (
    DILoadConflictError,
    DILoadCycleDetectedError,
    DILoadError,
    DILoadInvalidNameError,
    DILoadInvalidStateError,
    DILoadMissingDependencyError,
    DILoadNotFoundError,
    DILoadResolutionError,
)
from diload.settings import ContainerSettings
from diload.types import CaseStyle, ContainerStatus, DependencyStatus, InjectionMode

__all__ = [
    "CaseStyle",
    "Container",
    "ContainerSettings",
    "ContainerStatus",
    "DILoadConflictError",
    "DILoadCycleDetectedError",
    "DILoadError",
    "DILoadInvalidNameError",
    "DILoadInvalidStateError",
    "DILoadMissingDependencyError",
    "DILoadNotFoundError",
    "DILoadResolutionError",
    "DependencyStatus",
    "InjectionMode",
]
