"""
SugarScan - Factory method metadata extraction for matcher libraries.

Scans a class (or module) for marked factory methods and describes each
one in a normalized, language-agnostic form for sugar generation.
"""

__version__ = "0.1.0"

from sugarscan.capabilities import CapabilityError, CapabilityResolver
from sugarscan.config import ScanOptions
from sugarscan.readers import (
    ModuleFactoryReader,
    ReflectiveFactoryReader,
    read_factory_methods,
)
from sugarscan.schema import DescriptorBuilder, MethodDescriptor, Parameter

__all__ = [
    "CapabilityError",
    "CapabilityResolver",
    "DescriptorBuilder",
    "MethodDescriptor",
    "ModuleFactoryReader",
    "Parameter",
    "ReflectiveFactoryReader",
    "ScanOptions",
    "read_factory_methods",
]
