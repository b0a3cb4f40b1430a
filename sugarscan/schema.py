"""
SugarScan Descriptor Schema

This module defines the records produced for each discovered factory
method. A sugar generator consumes these records to emit convenience
wrappers, so every field holds canonical, generation-ready text rather
than live type objects.

Design Principles:
    1. Descriptors are immutable once built (frozen dataclasses, tuples)
    2. Construction is append-only through DescriptorBuilder
    3. Ordering is preserved: parameters, type parameters and exceptions
       keep their declaration order
    4. Human-readable when serialized (see MethodDescriptor.to_dict)
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Parameter:
    """
    A single factory method parameter.

    Attributes:
        type_name: Canonical type text (e.g. "str", "int...")
        name: Positional placeholder ("param1", "param2", ...)
    """
    type_name: str
    name: str


@dataclass(frozen=True)
class MethodDescriptor:
    """
    Normalized description of one factory method.

    Attributes:
        declaring_type_name: Qualified name of the class (or module) that
            declares the method
        method_name: The method's simple name
        return_type_name: Canonical text of the raw return type
        generic_return_element: Canonical text of the first type argument
            of a parameterized return type, or None
        type_parameters: Type variable declarations, e.g. "T extends Sized"
        parameters: Parameters in declaration order
        exceptions: Declared exception names in declaration order

    Example:
        >>> descriptor = MethodDescriptor(
        ...     declaring_type_name="mylib.Matchers",
        ...     method_name="equal_to_ignoring_case",
        ...     return_type_name="mylib.Matcher",
        ...     generic_return_element="str",
        ...     parameters=(Parameter("str", "param1"),),
        ... )
    """
    declaring_type_name: str
    method_name: str
    return_type_name: str
    generic_return_element: Optional[str] = None
    type_parameters: tuple[str, ...] = ()
    parameters: tuple[Parameter, ...] = ()
    exceptions: tuple[str, ...] = ()

    @property
    def qualified_name(self) -> str:
        """Declaring type and method name joined with a dot."""
        return f"{self.declaring_type_name}.{self.method_name}"

    def signature(self) -> str:
        """
        Render a one-line, human-readable signature.

        Example output:
            <T extends Sized> mylib.Matcher[T] has_length(int param1)
        """
        parts = []
        if self.type_parameters:
            parts.append(f"<{', '.join(self.type_parameters)}>")

        return_text = self.return_type_name
        if self.generic_return_element is not None:
            return_text += f"[{self.generic_return_element}]"
        parts.append(return_text)

        params = ", ".join(f"{p.type_name} {p.name}" for p in self.parameters)
        parts.append(f"{self.method_name}({params})")

        if self.exceptions:
            parts.append(f"raises {', '.join(self.exceptions)}")

        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "declaring_type_name": self.declaring_type_name,
            "method_name": self.method_name,
            "return_type_name": self.return_type_name,
            "generic_return_element": self.generic_return_element,
            "type_parameters": list(self.type_parameters),
            "parameters": [
                {"type_name": p.type_name, "name": p.name}
                for p in self.parameters
            ],
            "exceptions": list(self.exceptions),
        }


@dataclass
class DescriptorBuilder:
    """
    Append-only builder for MethodDescriptor.

    The builder is the only mutable stage of a descriptor's life. Readers
    fill it in a single pass and call build() once; the result is frozen.

    Usage:
        builder = DescriptorBuilder("mylib.Matchers", "anything", "mylib.Matcher")
        builder.add_parameter("str")
        descriptor = builder.build()
    """
    declaring_type_name: str
    method_name: str
    return_type_name: str
    generic_return_element: Optional[str] = None
    _type_parameters: list[str] = field(default_factory=list, init=False)
    _parameters: list[Parameter] = field(default_factory=list, init=False)
    _exceptions: list[str] = field(default_factory=list, init=False)

    def add_type_parameter(self, declaration: str) -> None:
        self._type_parameters.append(declaration)

    def set_generic_return_element(self, type_name: str) -> None:
        self.generic_return_element = type_name

    def add_parameter(self, type_name: str) -> Parameter:
        """
        Append a parameter, assigning the next positional placeholder name.

        Args:
            type_name: Canonical type text of the parameter

        Returns:
            The Parameter that was appended
        """
        parameter = Parameter(type_name, f"param{len(self._parameters) + 1}")
        self._parameters.append(parameter)
        return parameter

    def add_exception(self, type_name: str) -> None:
        self._exceptions.append(type_name)

    def build(self) -> MethodDescriptor:
        """Freeze the collected values into a MethodDescriptor."""
        return MethodDescriptor(
            declaring_type_name=self.declaring_type_name,
            method_name=self.method_name,
            return_type_name=self.return_type_name,
            generic_return_element=self.generic_return_element,
            type_parameters=tuple(self._type_parameters),
            parameters=tuple(self._parameters),
            exceptions=tuple(self._exceptions),
        )
