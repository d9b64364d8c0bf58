# game_launcher/core/versioning.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

MAX_COMPONENT = 65535

_SEGMENT_RE = re.compile(r"^\s*\+?([0-9]+)\s*$")


class VersionFormatError(ValueError):
    pass


@dataclass(frozen=True)
class Version:
    """
    major.minor.subminor, each component in 0..65535.

    Only equality is defined. A local build that is "newer" than the server
    is still a different version and gets reinstalled.
    """
    major: int
    minor: int
    subminor: int

    ZERO: ClassVar["Version"]

    def __post_init__(self) -> None:
        for name in ("major", "minor", "subminor"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise VersionFormatError(f"invalid version ({name} is not int): {v!r}")
            if v < 0 or v > MAX_COMPONENT:
                raise VersionFormatError(f"invalid version ({name} out of range): {v}")

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        "1.2.3" -> Version(1, 2, 3)
        "1.2"   -> Version.ZERO (wrong segment count is tolerated)
        "1.x.3" -> VersionFormatError
        """
        parts = (text or "").split(".")
        if len(parts) != 3:
            return cls.ZERO

        nums = []
        for seg in parts:
            m = _SEGMENT_RE.match(seg)
            if m is None:
                raise VersionFormatError(f"invalid version (not int): {text!r}")
            try:
                nums.append(int(m.group(1)))
            except ValueError:
                # int() refuses absurdly long digit strings
                raise VersionFormatError(f"invalid version (segment too long): {text[:40]!r}...")

        return cls(nums[0], nums[1], nums[2])

    @property
    def label(self) -> str:
        return f"v{self}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.subminor}"


Version.ZERO = Version(0, 0, 0)
