"""
Factory Method Predicate

Decides whether a candidate member is a matcher factory method. The rules
are independent named checks, applied in order:

    1. has_static_public_modifiers - static, and not underscore-private
    2. find_marker                 - carries an instance of the marker type
    3. is_not_excluded             - marker's excludes lacks the target id
    4. returns_matcher             - raw return type subclasses Matcher

To use another set of rules, subclass and override __call__ or any of
the individual checks.
"""

import typing
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Optional, get_origin

from sugarscan.capabilities import Capabilities, CapabilityError


_HINT_ERRORS = (NameError, TypeError, AttributeError, SyntaxError)


class _Annotated:
    """Carries a single annotation so it can be evaluated on its own."""

    def __init__(self, annotations: dict[str, Any]):
        self.__annotations__ = annotations


def resolve_type_hints(function: Callable) -> tuple[dict[str, Any], Optional[str]]:
    """
    Resolve a function's annotations to live type objects.

    When a forward reference cannot be evaluated, every annotation is
    resolved separately against the function's globals. Only the ones that
    still fail keep their raw (possibly string) value.

    Returns:
        Tuple of (hints, error message or None)
    """
    try:
        return typing.get_type_hints(function), None
    except _HINT_ERRORS as e:
        error = f"{type(e).__name__}: {e}"

    globalns = getattr(function, "__globals__", None)
    hints: dict[str, Any] = {}
    for name, annotation in dict(getattr(function, "__annotations__", None) or {}).items():
        try:
            hints.update(
                typing.get_type_hints(_Annotated({name: annotation}), globalns=globalns)
            )
        except _HINT_ERRORS:
            hints[name] = annotation
    return hints, error


@dataclass
class Candidate:
    """
    A member considered during a scan.

    Attributes:
        name: Attribute name on the scanned class or module
        function: The underlying plain function
        is_static: Whether the member is callable without an instance
        declaring_type_name: Qualified name of the declaring class/module
    """
    name: str
    function: Callable
    is_static: bool
    declaring_type_name: str

    @property
    def qualified_name(self) -> str:
        return f"{self.declaring_type_name}.{self.name}"

    @cached_property
    def _resolved_hints(self) -> tuple[dict[str, Any], Optional[str]]:
        return resolve_type_hints(self.function)

    @property
    def type_hints(self) -> dict[str, Any]:
        return self._resolved_hints[0]

    @property
    def hint_error(self) -> Optional[str]:
        return self._resolved_hints[1]


class FactoryMethodPredicate:
    """
    Classifies candidates as factory methods for one exclusion target.

    Usage:
        predicate = FactoryMethodPredicate(capabilities, target="gwt")
        factories = [c for c in candidates if predicate(c)]
    """

    def __init__(self, capabilities: Capabilities, target: str):
        self.capabilities = capabilities
        self.target = target

    def __call__(self, candidate: Candidate) -> bool:
        if not self.has_static_public_modifiers(candidate):
            return False
        marker = self.find_marker(candidate.function)
        if marker is None:
            return False
        return (
            self.is_not_excluded(marker)
            and self.returns_matcher(candidate.type_hints.get("return"))
        )

    def has_static_public_modifiers(self, candidate: Candidate) -> bool:
        return candidate.is_static and not candidate.name.startswith("_")

    def find_marker(self, function: Callable) -> Optional[Any]:
        """
        Find the marker instance the factory decorator attached.

        Returns:
            The first attribute value that is an instance of the marker
            type, or None if the function is unmarked
        """
        for value in getattr(function, "__dict__", {}).values():
            if isinstance(value, self.capabilities.marker_type):
                return value
        return None

    def is_not_excluded(self, marker: Any) -> bool:
        """
        Check the marker's excludes against the target id.

        A missing (None) or empty excludes always passes.

        Raises:
            CapabilityError: If reading the accessor fails. The marker type
                must always expose it, so this is never a per-method skip.
        """
        accessor = self.capabilities.excludes_accessor
        try:
            excludes = getattr(marker, accessor)
            if callable(excludes):
                excludes = excludes()
        except Exception as e:
            raise CapabilityError(
                f"Cannot load matcher core: reading {accessor} failed: {e}"
            ) from e

        if not excludes:
            return True
        if isinstance(excludes, str):
            excludes = (excludes,)
        return self.target not in excludes

    def returns_matcher(self, return_hint: Any) -> bool:
        """Check the raw return type is a subclass of the matcher type."""
        raw = get_origin(return_hint) or return_hint
        return isinstance(raw, type) and issubclass(raw, self.capabilities.matcher_type)
