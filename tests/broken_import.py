"""A module that exists but cannot be imported."""

from decimal import NoSuchThing  # noqa: F401


class Unreachable:
    pass
