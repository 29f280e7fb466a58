from __future__ import annotations

import re

from diload.exceptions import DILoadInvalidNameError
from diload.types import CaseStyle

NAMESPACE_SEPARATOR = ":"

_IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z$_][0-9a-zA-Z\-$_]*")

# Acronym runs followed by a capitalized word, capitalized or lower words,
# remaining upper-case runs, then digit runs. Everything else separates words.
_WORD_PATTERN = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")


def split_words(value: str) -> list[str]:
    """Split a name into words on separators, camel humps, acronyms and digits.

    Examples:
        .. code-block:: python

            split_words("fooBar_lib")  # ["foo", "Bar", "lib"]
            split_words("XMLHttp-request")  # ["XML", "Http", "request"]

    """
    return _WORD_PATTERN.findall(value)


def to_identifier_case(value: str, case_style: CaseStyle) -> str:
    """Render ``value`` in the given case style."""
    words = [word.lower() for word in split_words(value)]
    if case_style is CaseStyle.SNAKE:
        return "_".join(words)
    return "".join(words[:1] + [word.capitalize() for word in words[1:]])


def split_name(raw_name: str) -> tuple[str | None, str]:
    """Split a raw name into ``(namespace, label)`` on the first ``:``."""
    namespace, separator, label = raw_name.partition(NAMESPACE_SEPARATOR)
    if not separator:
        return None, raw_name
    return namespace, label


def is_valid_segment(segment: str) -> bool:
    return _IDENTIFIER_PATTERN.fullmatch(segment) is not None


class IdentifierNormalizer:
    """Turn user supplied names into canonical identifiers.

    A name is ``label`` or ``namespace:label``. The namespace is appended to
    the label (``lib:foo`` becomes ``foo_lib`` before case conversion), so
    namespaced dependencies still read naturally as keyword names.

    Normalization is pure, so results are cached per normalizer.
    """

    def __init__(self, case_style: CaseStyle = CaseStyle.CAMEL) -> None:
        self._case_style = case_style
        self._cache: dict[str, str] = {}

    @property
    def case_style(self) -> CaseStyle:
        return self._case_style

    def normalize(self, raw_name: str) -> str:
        """Return the identifier for ``raw_name``.

        Args:
            raw_name: Name as written by the caller, optionally namespaced.

        Returns:
            The identifier rendered in the normalizer's case style.

        Raises:
            DILoadInvalidNameError: If the namespace or the label does not
                match the identifier grammar.

        """
        cached = self._cache.get(raw_name)
        if cached is not None:
            return cached

        namespace, label = split_name(raw_name)
        if namespace is not None and not is_valid_segment(namespace):
            raise DILoadInvalidNameError(namespace, "namespace")
        if not is_valid_segment(label):
            raise DILoadInvalidNameError(label, "name")

        full_name = label if namespace is None else f"{label}_{namespace}"
        identifier = to_identifier_case(full_name, self._case_style)
        self._cache[raw_name] = identifier
        return identifier
