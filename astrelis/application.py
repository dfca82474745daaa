"""Application description: arguments, version, specification and creation status."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass
class CommandLineArguments:
    """The arguments given to the program, without the program name."""

    arguments: List[str] = field(default_factory=list)

    @classmethod
    def parse(cls, argv: Optional[Sequence[str]] = None) -> "CommandLineArguments":
        """Build from a full argv whose first entry is the program name."""
        if argv is None:
            argv = sys.argv
        return cls([str(argument) for argument in list(argv)[1:]])


class ReleaseType(enum.IntEnum):
    ALPHA = 0
    BETA = 1
    RELEASE_CANDIDATE = 2
    RELEASE = 3


_RELEASE_NAMES = {
    ReleaseType.ALPHA: "Alpha",
    ReleaseType.BETA: "Beta",
    ReleaseType.RELEASE_CANDIDATE: "Release Candidate",
    ReleaseType.RELEASE: "Release",
}


@dataclass(frozen=True)
class ApplicationVersion:
    """A release type with major, minor and patch numbers, each 0 to 255."""

    type: ReleaseType = ReleaseType.ALPHA
    major: int = 0
    minor: int = 0
    patch: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", ReleaseType(self.type))
        for label, number in (("major", self.major), ("minor", self.minor), ("patch", self.patch)):
            if not isinstance(number, int) or not 0 <= number <= 255:
                raise ValueError(f"{label} version must be an integer from 0 to 255")

    def __str__(self) -> str:
        return f"{_RELEASE_NAMES[self.type]} {self.major}.{self.minor}.{self.patch}"


@dataclass
class ApplicationSpecification:
    """Settings an application is created with."""

    name: str = "Astrelis Application"
    version: ApplicationVersion = field(default_factory=ApplicationVersion)
    working_directory: str = ""
    arguments: CommandLineArguments = field(default_factory=CommandLineArguments)


class CreationStatus(enum.IntEnum):
    SUCCESS = 0
    WINDOW_CREATION_FAILED = 1
    RENDER_SYSTEM_CREATION_FAILED = 2