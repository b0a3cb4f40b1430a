"""
Factory method readers for different kinds of scan targets.

Available Readers:
    - ReflectiveFactoryReader: Static methods of a class (and its bases)
    - ModuleFactoryReader: Functions of a module

Usage:
    from sugarscan.readers import read_factory_methods

    for method in read_factory_methods(MyMatchers, "gwt"):
        print(method.signature())
"""

from typing import Any, Iterator, Optional

from sugarscan.capabilities import CapabilityResolver
from sugarscan.config import ScanOptions
from sugarscan.readers.base import BaseReader
from sugarscan.readers.module import ModuleFactoryReader
from sugarscan.readers.reflective import ReflectiveFactoryReader
from sugarscan.schema import MethodDescriptor


class ReaderRegistry:
    """
    Registry of reader classes, consulted in registration order.

    Usage:
        registry = ReaderRegistry()
        registry.register(ReflectiveFactoryReader)
        reader = registry.create_reader(MyMatchers, "gwt")
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._readers: list[type[BaseReader]] = []

    def register(self, reader_cls: type[BaseReader]) -> None:
        """
        Register a reader class with the registry.

        Args:
            reader_cls: The BaseReader subclass to register
        """
        self._readers.append(reader_cls)

    def get_readers(self) -> list[type[BaseReader]]:
        """Get all registered reader classes."""
        return self._readers.copy()

    def create_reader(
        self,
        target: Any,
        exclude_target: str,
        options: Optional[ScanOptions] = None,
        resolver: Optional[CapabilityResolver] = None,
    ) -> BaseReader:
        """
        Instantiate the first reader that can handle the target.

        Raises:
            ValueError: If no registered reader handles the target
        """
        for reader_cls in self._readers:
            if reader_cls.can_handle(target):
                return reader_cls(target, exclude_target, options, resolver)
        raise ValueError(
            f"Cannot scan {target!r}: expected a class or a module"
        )


def create_reader_registry() -> ReaderRegistry:
    """Create a registry with all built-in readers."""
    registry = ReaderRegistry()
    registry.register(ReflectiveFactoryReader)
    registry.register(ModuleFactoryReader)
    return registry


def read_factory_methods(
    target: Any,
    exclude_target: str,
    options: Optional[ScanOptions] = None,
) -> Iterator[MethodDescriptor]:
    """
    Scan a class or module for factory methods.

    Args:
        target: The class or module to scan
        exclude_target: Id of the generation target; methods whose marker
            excludes it are skipped
        options: Capability names (defaults to ScanOptions())

    Returns:
        A fresh lazy iterator of MethodDescriptor

    Raises:
        ValueError: If the target is neither a class nor a module
    """
    reader = create_reader_registry().create_reader(target, exclude_target, options)
    return iter(reader)


__all__ = [
    "BaseReader",
    "ModuleFactoryReader",
    "ReaderRegistry",
    "ReflectiveFactoryReader",
    "create_reader_registry",
    "read_factory_methods",
]
