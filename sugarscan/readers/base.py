"""
Base Reader Interface

This module defines the abstract base class for factory method readers.
A reader lists the candidate members of one kind of scan target (a class,
a module) and turns the ones accepted by FactoryMethodPredicate into
MethodDescriptor records.

Usage Pattern:
    1. can_handle() checks whether the reader understands the target
    2. Iterating the reader resolves the marker/matcher capabilities
    3. candidates() lists members; the predicate filters them
    4. build_descriptor() normalizes each accepted member's signature

Iteration Model:
    Every iter() call starts a fresh, lazy scan. Nothing is memoized, so
    a second pass reflects the target as it is at that moment.
    Enumeration follows dir() order. That order is an implementation
    detail of the runtime, not a guarantee; compare results as sets.
"""

import builtins
import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional, get_args, get_origin

from sugarscan.capabilities import CapabilityResolver
from sugarscan.config import ScanOptions
from sugarscan.docstrings import parse_raises
from sugarscan.normalizer import (
    collect_type_variables,
    to_varargs,
    type_parameter_to_string,
    type_to_string,
)
from sugarscan.predicate import Candidate, FactoryMethodPredicate
from sugarscan.schema import DescriptorBuilder, MethodDescriptor


class BaseReader(ABC):
    """
    Abstract base class for all factory method readers.

    Subclasses must implement:
        - name: Human-readable name for the reader
        - can_handle(): Check whether a target object is supported
        - candidates(): List the members to classify

    Attributes:
        target: The class or module being scanned
        exclude_target: Exclusion target id checked against markers
        options: Capability names and rendering options
        resolver: Resolves capability names to live types
    """

    name: str = "Base"

    def __init__(
        self,
        target: Any,
        exclude_target: str,
        options: Optional[ScanOptions] = None,
        resolver: Optional[CapabilityResolver] = None,
    ):
        self.target = target
        self.exclude_target = exclude_target
        self.options = options or ScanOptions()
        self.resolver = resolver or CapabilityResolver()
        self._warnings: list[str] = []

    def __iter__(self) -> Iterator[MethodDescriptor]:
        return self._scan()

    def add_warning(self, message: str) -> None:
        """
        Record a non-fatal issue encountered while reading.

        Args:
            message: The warning message to record
        """
        self._warnings.append(f"[{self.name}] {message}")

    def get_warnings(self) -> list[str]:
        """Get all warnings recorded during the latest scan."""
        return self._warnings.copy()

    def clear_warnings(self) -> None:
        """Clear all recorded warnings."""
        self._warnings = []

    @classmethod
    @abstractmethod
    def can_handle(cls, target: Any) -> bool:
        """
        Determine if this reader can scan the given object.

        Args:
            target: Object supplied by the caller

        Returns:
            True if candidates() understands this kind of object
        """
        pass

    @abstractmethod
    def candidates(self) -> Iterator[Candidate]:
        """
        List every member that might be a factory method.

        Members need not be static or public; the predicate decides.
        """
        pass

    def create_predicate(self) -> FactoryMethodPredicate:
        """
        Resolve capabilities and build the predicate for one scan.

        Raises:
            CapabilityError: If the matcher core cannot be loaded
        """
        capabilities = self.resolver.resolve_capabilities(self.options)
        return FactoryMethodPredicate(capabilities, self.exclude_target)

    def build_descriptor(self, candidate: Candidate) -> MethodDescriptor:
        """
        Describe an accepted factory method.

        Args:
            candidate: A candidate the predicate accepted

        Returns:
            A frozen MethodDescriptor
        """
        function = candidate.function
        hints = candidate.type_hints

        return_hint = hints.get("return")
        builder = DescriptorBuilder(
            declaring_type_name=candidate.declaring_type_name,
            method_name=candidate.name,
            return_type_name=type_to_string(get_origin(return_hint) or return_hint),
        )

        signature = inspect.signature(function)
        for type_var in self._type_variables(function, signature, hints):
            builder.add_type_parameter(
                type_parameter_to_string(type_var, self.options.bound_separator)
            )

        if get_origin(return_hint) is not None and get_args(return_hint):
            builder.set_generic_return_element(type_to_string(get_args(return_hint)[0]))

        for parameter in signature.parameters.values():
            builder.add_parameter(self._parameter_type(parameter, hints))

        for exception_name in parse_raises(inspect.getdoc(function)):
            builder.add_exception(self._exception_type(function, exception_name))

        return builder.build()

    def _scan(self) -> Iterator[MethodDescriptor]:
        self.clear_warnings()
        predicate = self.create_predicate()
        for candidate in self.candidates():
            accepted = predicate(candidate)
            if predicate.find_marker(candidate.function) is not None and candidate.hint_error:
                self.add_warning(
                    f"{candidate.qualified_name}: could not resolve all annotations "
                    f"({candidate.hint_error}); keeping those unevaluated"
                )
            if accepted:
                yield self.build_descriptor(candidate)

    def _type_variables(
        self,
        function: Callable,
        signature: inspect.Signature,
        hints: dict[str, Any],
    ) -> list[Any]:
        declared = getattr(function, "__type_params__", ())
        if declared:
            return list(declared)
        ordered = [hints[name] for name in signature.parameters if name in hints]
        if "return" in hints:
            ordered.append(hints["return"])
        return collect_type_variables(ordered)

    def _parameter_type(self, parameter: inspect.Parameter, hints: dict[str, Any]) -> str:
        annotation = hints.get(parameter.name, Any)
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            # *args: X arrives as tuple[X, ...]; "X[]" becomes "X..."
            return to_varargs(type_to_string(tuple[annotation, ...]))
        if parameter.kind is inspect.Parameter.VAR_KEYWORD:
            return type_to_string(dict[str, annotation])
        return type_to_string(annotation)

    def _exception_type(self, function: Callable, name: str) -> str:
        """Resolve a documented exception name; unknown names stay verbatim."""
        namespace = getattr(function, "__globals__", {})
        head, *rest = name.split(".")
        obj = namespace.get(head, getattr(builtins, head, None))
        for attr in rest:
            obj = getattr(obj, attr, None)
        if isinstance(obj, type) and issubclass(obj, BaseException):
            return type_to_string(obj)
        return name
