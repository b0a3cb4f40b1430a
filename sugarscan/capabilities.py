"""
Capability Resolver

Locates the factory marker type and the matcher capability type at
runtime, by qualified name. The scanner is built independently of (and
before) the library it scans, so it must never import that library at
module level.

Name forms accepted:
    - "pkg.module:Attr.Nested"  explicit module / attribute split
    - "pkg.module.Attr"         longest importable module prefix wins

Any failure here means the scanner is running against an incompatible or
absent matcher library. That is fatal for the whole scan, never a
per-method skip, so everything is reported as CapabilityError.
"""

import importlib
from dataclasses import dataclass
from typing import Any

from sugarscan.config import ScanOptions


class CapabilityError(RuntimeError):
    """The matcher core (marker type, matcher type or accessor) is unusable."""


@dataclass(frozen=True)
class Capabilities:
    """
    Resolved handles for one scan.

    Attributes:
        marker_type: The factory marker class
        matcher_type: The matcher capability class
        excludes_accessor: Name of the marker attribute listing excluded
            targets; verified to exist on marker_type
    """
    marker_type: type
    matcher_type: type
    excludes_accessor: str


class CapabilityResolver:
    """
    Resolves qualified names to live objects.

    Usage:
        resolver = CapabilityResolver()
        capabilities = resolver.resolve_capabilities(ScanOptions())
    """

    def resolve(self, name: str) -> Any:
        """
        Resolve a qualified name to an object.

        Args:
            name: "pkg.module:Attr" or "pkg.module.Attr"

        Returns:
            The resolved object

        Raises:
            ValueError: If the name is empty or cannot be resolved
        """
        if not name or not name.strip():
            raise ValueError("Empty qualified name")

        if ":" in name:
            module_name, _, attr_path = name.partition(":")
            module = self._import(module_name, name)
            return self._walk(module, attr_path.split(".") if attr_path else [], name)

        parts = name.split(".")
        # Try the longest module prefix first: "a.b.C" -> a.b, then a
        for split in range(len(parts), 0, -1):
            module_name = ".".join(parts[:split])
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as e:
                # Only swallow "this prefix is not a module", not failures
                # raised by a module that does exist
                if e.name is not None and not (
                    module_name == e.name or module_name.startswith(e.name + ".")
                ):
                    raise ValueError(f"Cannot import {name}: {e}") from e
                continue
            except Exception as e:
                raise ValueError(f"Cannot import {name}: {type(e).__name__}: {e}") from e
            return self._walk(module, parts[split:], name)

        raise ValueError(f"Cannot import {name}: no importable module prefix")

    def resolve_type(self, name: str) -> type:
        """
        Resolve a qualified name that must denote a class.

        Raises:
            CapabilityError: If the name cannot be resolved or is not a class
        """
        try:
            resolved = self.resolve(name)
        except ValueError as e:
            raise CapabilityError(f"Cannot load matcher core: {e}") from e
        if not isinstance(resolved, type):
            raise CapabilityError(
                f"Cannot load matcher core: {name} is not a class"
            )
        return resolved

    def resolve_member(self, owner: type, member: str) -> Any:
        """
        Look up a member that the owner type must expose.

        Raises:
            CapabilityError: If the member is missing
        """
        try:
            return getattr(owner, member)
        except AttributeError as e:
            raise CapabilityError(
                f"Cannot load matcher core: {owner.__qualname__} has no "
                f"'{member}' accessor"
            ) from e

    def resolve_capabilities(self, options: ScanOptions) -> Capabilities:
        """
        Resolve everything a scan needs, failing before any method is read.

        Args:
            options: Names of the marker type, matcher type and accessor

        Returns:
            Capabilities for the scan

        Raises:
            CapabilityError: If any capability is missing
        """
        marker_type = self.resolve_type(options.marker_type)
        matcher_type = self.resolve_type(options.matcher_type)
        self.resolve_member(marker_type, options.excludes_accessor)
        return Capabilities(
            marker_type=marker_type,
            matcher_type=matcher_type,
            excludes_accessor=options.excludes_accessor,
        )

    def _import(self, module_name: str, full_name: str) -> Any:
        try:
            return importlib.import_module(module_name)
        except Exception as e:
            raise ValueError(
                f"Cannot import {full_name}: {type(e).__name__}: {e}"
            ) from e

    def _walk(self, obj: Any, attrs: list[str], full_name: str) -> Any:
        for attr in attrs:
            try:
                obj = getattr(obj, attr)
            except AttributeError as e:
                raise ValueError(f"Cannot resolve {full_name}: no attribute '{attr}'") from e
        return obj
