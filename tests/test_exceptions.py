"""Tests for the exception hierarchy and structured attributes."""

import pytest

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
from diload.types import ContainerStatus


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            DILoadInvalidNameError("foo{bar", "name"),
            DILoadConflictError("register dependency", "foo", "foo", conflicts_with_alias=False),
            DILoadMissingDependencyError("foo", ()),
            DILoadCycleDetectedError("foo", ("foo",)),
            DILoadInvalidStateError("nope", ContainerStatus.NEW),
            DILoadNotFoundError("foo"),
        ],
    )
    def test_all_errors_are_diload_errors(self, exc: DILoadError) -> None:
        assert isinstance(exc, DILoadError)
        assert isinstance(exc, Exception)

    def test_path_errors_share_base(self) -> None:
        assert isinstance(DILoadMissingDependencyError("foo", ()), DILoadResolutionError)
        assert isinstance(DILoadCycleDetectedError("foo", ()), DILoadResolutionError)

    async def test_can_catch_all_with_diload_error(self, container: Container) -> None:
        container.register("foo", lambda _deps: None, ["bar"])

        with pytest.raises(DILoadError):
            await container.load()

    async def test_factory_errors_are_not_wrapped(self, container: Container) -> None:
        def broken(_deps: object) -> None:
            msg = "broken factory"
            raise ValueError(msg)

        container.register("foo", broken)

        with pytest.raises(ValueError, match="broken factory") as exc_info:
            await container.load()

        assert not isinstance(exc_info.value, DILoadError)


class TestExceptionAttributes:
    def test_invalid_name(self) -> None:
        exc = DILoadInvalidNameError("{foo", "namespace")

        assert exc.name == "{foo"
        assert exc.segment == "namespace"
        assert str(exc) == "The namespace, {foo, is not a valid identifier"

    def test_conflict_with_dependency(self) -> None:
        exc = DILoadConflictError("set constant value", "foo_bar", "foo-bar", conflicts_with_alias=False)

        assert exc.action == "set constant value"
        assert exc.name == "foo_bar"
        assert exc.conflicting_name == "foo-bar"
        assert str(exc) == (
            "Unable to set constant value, foo_bar, because it conflicts with dependency, foo-bar"
        )

    def test_conflict_with_alias(self) -> None:
        exc = DILoadConflictError("register alias", "bar", "bar", conflicts_with_alias=True)

        assert exc.conflicts_with_alias is True
        assert str(exc) == "Unable to register alias, bar, because it conflicts with the alias, bar"

    def test_missing_dependency(self) -> None:
        exc = DILoadMissingDependencyError("baz", ["foo", "bar [qux]"])

        assert exc.name == "baz"
        assert exc.path == ("foo", "bar [qux]")
        assert str(exc) == "The dependency, baz, is not registered. Path: foo > bar [qux]"

    def test_missing_dependency_with_empty_path(self) -> None:
        assert str(DILoadMissingDependencyError("baz", ())) == (
            "The dependency, baz, is not registered. Path: "
        )

    def test_cycle_detected(self) -> None:
        exc = DILoadCycleDetectedError("aa [a]", ("a", "bb [b]"))

        assert exc.name == "aa [a]"
        assert exc.path == ("a", "bb [b]")
        assert str(exc) == "Cycle detected in dependencies: a > bb [b] > aa [a]"

    def test_invalid_state(self) -> None:
        exc = DILoadInvalidStateError("Attempt to get dependency before load", ContainerStatus.NEW)

        assert exc.status is ContainerStatus.NEW
        assert str(exc) == "Attempt to get dependency before load"

    def test_not_found(self) -> None:
        exc = DILoadNotFoundError("foo")

        assert exc.name == "foo"
        assert str(exc) == "foo is not registered as a dependency or alias"

    async def test_raised_errors_carry_display_names(self, container: Container) -> None:
        container.register("foo-bar", lambda _deps: None)

        with pytest.raises(DILoadConflictError) as exc_info:
            container.alias("foo-bar", "fooBar")

        assert exc_info.value.name == "fooBar"
        assert exc_info.value.conflicting_name == "foo-bar"
