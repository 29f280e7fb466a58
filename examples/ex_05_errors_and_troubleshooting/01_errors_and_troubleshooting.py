"""Errors and troubleshooting.

Every diload error derives from ``DILoadError``. Load errors carry the
resolution path that led to them; factory exceptions propagate unchanged.
"""

from __future__ import annotations

import asyncio

from diload import (
    Container,
    DILoadConflictError,
    DILoadCycleDetectedError,
    DILoadInvalidStateError,
    DILoadMissingDependencyError,
)


async def main() -> None:
    container = Container()
    container.register("foo-bar", lambda _deps: None)
    try:
        container.register("foo_bar", lambda _deps: None)
    except DILoadConflictError as error:
        print(error)  # => Unable to register dependency, foo_bar, because it conflicts with dependency, foo-bar

    try:
        container.get("foo-bar")
    except DILoadInvalidStateError as error:
        print(error)  # => Attempt to get dependency before load

    missing = Container()
    missing.register("app", lambda _deps: None, ["service"])
    missing.register("service", lambda _deps: None, ["database"])
    try:
        await missing.load()
    except DILoadMissingDependencyError as error:
        print(error)  # => The dependency, database, is not registered. Path: app > service

    cyclic = Container()
    cyclic.register("a", lambda _deps: None, ["b"])
    cyclic.register("b", lambda _deps: None, ["a-alias"])
    cyclic.alias("a", "a-alias")
    try:
        await cyclic.load()
    except DILoadCycleDetectedError as error:
        print(error)  # => Cycle detected in dependencies: a > b > a-alias [a]
        print(f"status={cyclic.status.value}")  # => status=failed


if __name__ == "__main__":
    asyncio.run(main())
