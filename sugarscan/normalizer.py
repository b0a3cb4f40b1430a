"""
Signature Normalizer

Converts runtime type references (the objects found in ``__annotations__``
and returned by ``typing.get_type_hints``) into canonical, generation-ready
text.

Rules:
    - Forward references (strings) are kept verbatim
    - ``None`` / ``NoneType`` -> "None"
    - Arrays, i.e. homogeneous variable-length tuples ``tuple[X, ...]``
      -> component text + "[]" (nested arrays accumulate brackets)
    - Parameterized types defer to the host's own repr(), which already
      embeds argument text, unions and literals
    - Type variables -> their bare name
    - Plain classes -> "module.QualName" ("str" for builtins)

The default repr() of a class is "<class 'mod.Name'>" and a type variable
prints as "~T"; neither can be pasted into source, so those forms are
special-cased. Everything else the typing module already prints acceptably.

Limitations:
    - Variance sigils are stripped from repr() output with a regex, so a
      string Literal such as Literal["~x"] at the start of an argument
      list would be altered
"""

import re
import typing
from typing import Any, Iterable, ParamSpec, TypeVar, get_args, get_origin

ARRAY_SUFFIX = "[]"
VARARGS_SUFFIX = "..."
BOUND_SEPARATOR = " & "

# "~T", "+T_co", "-T_contra" at the start of the text or of an argument
_VARIANCE_SIGIL = re.compile(r"(?:^|(?<=[\[(,| ]))[~+-](?=[A-Za-z_])")
_TRAILING_ARRAY = re.compile(re.escape(ARRAY_SUFFIX) + r"$")


def is_array(tp: Any) -> bool:
    """Return True for ``tuple[X, ...]`` and ``typing.Tuple[X, ...]``."""
    if get_origin(tp) is not tuple:
        return False
    args = get_args(tp)
    return len(args) == 2 and args[1] is Ellipsis


def class_to_string(cls: type) -> str:
    """Fully qualified class name; builtins stay unqualified."""
    if cls is type(None):
        return "None"
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def type_to_string(tp: Any) -> str:
    """
    Get the canonical text of a type reference.

    Examples:
        >>> type_to_string(str)
        'str'
        >>> type_to_string(tuple[tuple[int, ...], ...])
        'int[][]'
        >>> type_to_string(dict[str, list[int]])
        'dict[str, list[int]]'

    Args:
        tp: Any object that can appear in an annotation

    Returns:
        Canonical type text. Never fails.
    """
    if isinstance(tp, str):
        return tp
    if isinstance(tp, typing.ForwardRef):
        return tp.__forward_arg__
    if tp is None:
        return "None"
    if is_array(tp):
        return type_to_string(get_args(tp)[0]) + ARRAY_SUFFIX
    # Checked before isinstance(tp, type): list[int] passes that test on 3.10
    if get_origin(tp) is not None:
        return _strip_variance(repr(tp))
    if isinstance(tp, (TypeVar, ParamSpec)):
        return tp.__name__
    if isinstance(tp, type):
        return class_to_string(tp)
    return _strip_variance(repr(tp))


def to_varargs(type_name: str) -> str:
    """Rewrite a trailing "[]" as "..." (``str[]`` -> ``str...``)."""
    return _TRAILING_ARRAY.sub(VARARGS_SUFFIX, type_name, count=1)


def bounds_of(type_var: Any) -> tuple[Any, ...]:
    """
    Get the bounds of a type variable.

    Constraints win over a single bound; an unbounded variable reports the
    universal top type ``object``.
    """
    constraints = getattr(type_var, "__constraints__", ())
    if constraints:
        return tuple(constraints)
    bound = getattr(type_var, "__bound__", None)
    if bound is not None:
        return (bound,)
    return (object,)


def type_parameter_to_string(
    type_var: Any,
    separator: str = BOUND_SEPARATOR,
) -> str:
    """
    Render a type variable declaration.

    ``T`` with no bound (or bound ``object``) renders as "T"; a single
    bound as "T extends A"; several as "T extends A & B".
    """
    if isinstance(type_var, ParamSpec):
        return f"**{type_var.__name__}"

    text = type_var.__name__
    has_bound = False
    for bound in bounds_of(type_var):
        if bound is object:
            continue
        if has_bound:
            text += separator
        else:
            text += " extends "
            has_bound = True
        text += type_to_string(bound)
    return text


def collect_type_variables(types: Iterable[Any]) -> list[Any]:
    """
    Collect type variables in order of first appearance.

    This is the declaration order for functions that predate PEP 695
    ``def f[T](...)`` syntax, and matches how typing.Generic orders its
    parameters.
    """
    found: list[Any] = []

    def visit(tp: Any) -> None:
        if isinstance(tp, (TypeVar, ParamSpec)):
            if tp not in found:
                found.append(tp)
            return
        for arg in get_args(tp):
            # Callable[[A, B], R] nests its argument types in a list
            if isinstance(arg, (list, tuple)):
                for item in arg:
                    visit(item)
            else:
                visit(arg)

    for tp in types:
        visit(tp)
    return found


def _strip_variance(text: str) -> str:
    return _VARIANCE_SIGIL.sub("", text)
