"""
Coordinator version values used for version-bounded rules.
"""

import functools
from typing import Tuple

from shared.errors import ValidationError


@functools.total_ordering
class CoordinatorVersion:
    """Ordered coordinator version such as ``0.215`` or ``0.250-SNAPSHOT``.

    Ordering looks only at the dot-separated numeric components. Missing
    trailing components count as zero and the ``-qualifier`` suffix is
    ignored, so ``0.200``, ``0.200.0`` and ``0.200-SNAPSHOT`` are equal.
    """

    __slots__ = ("_version", "_components")

    def __init__(self, version: str):
        if version is None:
            raise ValidationError("Version is null")
        self._version = str(version).strip()
        self._components = self._parse(self._version)

    @staticmethod
    def _parse(version: str) -> Tuple[int, ...]:
        parts = version.split("-", 1)[0].split(".")
        if not all(part.isdecimal() for part in parts):
            raise ValidationError("Invalid version", {"version": version})
        components = tuple(int(part) for part in parts)

        # Strip trailing zeros so that 0.200 == 0.200.0
        end = len(components)
        while end > 1 and components[end - 1] == 0:
            end -= 1
        return components[:end]

    @property
    def version(self) -> str:
        return self._version

    def less_than_or_equal_to(self, other: "CoordinatorVersion") -> bool:
        return self._components <= other._components

    def greater_than_or_equal_to(self, other: "CoordinatorVersion") -> bool:
        return self._components >= other._components

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CoordinatorVersion):
            return NotImplemented
        return self._components == other._components

    def __lt__(self, other: "CoordinatorVersion") -> bool:
        if not isinstance(other, CoordinatorVersion):
            return NotImplemented
        return self._components < other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def __str__(self) -> str:
        return self._version

    def __repr__(self) -> str:
        return f"CoordinatorVersion({self._version!r})"
