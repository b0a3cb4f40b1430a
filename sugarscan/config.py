"""
SugarScan configuration.

The marker and matcher capability types are named by string so that the
scanner never imports the annotated library at build time; the names are
resolved when a scan starts.

Environment variables:
    SUGARSCAN_MARKER_TYPE   overrides ScanOptions.marker_type
    SUGARSCAN_MATCHER_TYPE  overrides ScanOptions.matcher_type

The defaults follow PyHamcrest's module layout. PyHamcrest itself has no
factory marker, so real scans configure marker_type explicitly.
"""

import os
from dataclasses import dataclass
from typing import Optional

from sugarscan.normalizer import BOUND_SEPARATOR

DEFAULT_MARKER_TYPE = "hamcrest.core.factory:Factory"
DEFAULT_MATCHER_TYPE = "hamcrest.core.matcher:Matcher"
DEFAULT_EXCLUDES_ACCESSOR = "excludes"


@dataclass(frozen=True)
class ScanOptions:
    """
    Options controlling a factory method scan.

    Attributes:
        marker_type: Qualified name of the factory marker type
            ("pkg.module:Name" or "pkg.module.Name")
        matcher_type: Qualified name of the matcher capability type
        excludes_accessor: Marker attribute listing excluded targets
        bound_separator: Joins multiple type variable bounds
    """
    marker_type: str = DEFAULT_MARKER_TYPE
    matcher_type: str = DEFAULT_MATCHER_TYPE
    excludes_accessor: str = DEFAULT_EXCLUDES_ACCESSOR
    bound_separator: str = BOUND_SEPARATOR

    @classmethod
    def from_env(
        cls,
        marker_type: Optional[str] = None,
        matcher_type: Optional[str] = None,
    ) -> "ScanOptions":
        """
        Build options from explicit values, then environment, then defaults.

        Args:
            marker_type: Explicit marker type name (wins over environment)
            matcher_type: Explicit matcher type name (wins over environment)
        """
        return cls(
            marker_type=(
                marker_type
                or os.environ.get("SUGARSCAN_MARKER_TYPE")
                or DEFAULT_MARKER_TYPE
            ),
            matcher_type=(
                matcher_type
                or os.environ.get("SUGARSCAN_MATCHER_TYPE")
                or DEFAULT_MATCHER_TYPE
            ),
        )
