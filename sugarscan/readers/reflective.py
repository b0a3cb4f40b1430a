"""
Reflective Factory Reader

Reads factory methods from a class using runtime introspection.

Usage:
    for method in ReflectiveFactoryReader(MyMatchers, "gwt"):
        ...

All members matching '@factory @staticmethod def name(...) -> Matcher[...]'
(public, marked, not excluded for the target) are treated as factory
methods, including those inherited from base classes.

Caveat: introspection could recover parameter names, but descriptors use
positional placeholders (param1, param2, ...) so that generated sugar does
not depend on names that are not part of a factory's contract.
"""

import inspect
from typing import Any, Iterator

from sugarscan.normalizer import class_to_string
from sugarscan.predicate import Candidate
from sugarscan.readers.base import BaseReader


class ReflectiveFactoryReader(BaseReader):
    """
    Reads factory methods declared on (or inherited by) a class.

    staticmethod members are static; classmethods and plain functions are
    listed too so the predicate can reject them.
    """

    name = "Reflective"

    @classmethod
    def can_handle(cls, target: Any) -> bool:
        return inspect.isclass(target)

    def candidates(self) -> Iterator[Candidate]:
        for member_name in dir(self.target):
            try:
                static_attr = inspect.getattr_static(self.target, member_name)
            except AttributeError:
                # Listed by a custom __dir__ but not actually present
                continue

            if isinstance(static_attr, staticmethod):
                function, is_static = static_attr.__func__, True
            elif isinstance(static_attr, classmethod):
                function, is_static = static_attr.__func__, False
            elif inspect.isfunction(static_attr):
                function, is_static = static_attr, False
            else:
                continue

            yield Candidate(
                name=member_name,
                function=function,
                is_static=is_static,
                declaring_type_name=self._declaring_type_name(member_name),
            )

    def _declaring_type_name(self, member_name: str) -> str:
        for klass in inspect.getmro(self.target):
            if member_name in vars(klass):
                return class_to_string(klass)
        return class_to_string(self.target)
