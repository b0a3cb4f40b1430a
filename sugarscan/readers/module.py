"""
Module Factory Reader

Reads factory functions from a module. Module-level functions are the
usual home of matcher factories in Python (``from mylib import *``), and
behave like static methods of the module.

The declaring type of a re-exported function is the module that defines
it (``function.__module__``), not the module being scanned.
"""

import inspect
from typing import Any, Iterator

from sugarscan.predicate import Candidate
from sugarscan.readers.base import BaseReader


class ModuleFactoryReader(BaseReader):
    """Reads factory functions defined in or re-exported by a module."""

    name = "Module"

    @classmethod
    def can_handle(cls, target: Any) -> bool:
        return inspect.ismodule(target)

    def candidates(self) -> Iterator[Candidate]:
        for member_name in dir(self.target):
            value = getattr(self.target, member_name, None)
            if not inspect.isfunction(value):
                continue
            yield Candidate(
                name=member_name,
                function=value,
                is_static=True,
                declaring_type_name=value.__module__,
            )
