# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .errors import InvalidDirectory, MissingCriteria


class ErrorPolicy(Enum):
    """Whether content-read failures are reported to the user."""

    SURFACE = "surface"
    SUPPRESS = "suppress"


@dataclass(frozen=True)
class NameOnly:
    substring: str


@dataclass(frozen=True)
class ContentOnly:
    substring: str


@dataclass(frozen=True)
class Both:
    name: str
    content: str


Criteria = Union[NameOnly, ContentOnly, Both]


def _require_directory(path: str) -> None:
    if not os.path.isdir(path):
        raise InvalidDirectory(path)


@dataclass(frozen=True)
class Configuration:
    """
    Immutable description of one search run.

    The starting directory must exist however the instance is created.
    `Configuration.build(...)` additionally picks the criteria variant from
    optional name and content substrings.
    """

    starting_directory: str
    criteria: Criteria
    error_policy: ErrorPolicy = ErrorPolicy.SUPPRESS

    def __post_init__(self) -> None:
        start = os.fspath(self.starting_directory)
        object.__setattr__(self, "starting_directory", start)
        _require_directory(start)
        if not isinstance(self.criteria, (NameOnly, ContentOnly, Both)):
            raise TypeError(f"Unknown criteria: {self.criteria!r}")
        if not isinstance(self.error_policy, ErrorPolicy):
            raise TypeError(f"Unknown error policy: {self.error_policy!r}")

    @classmethod
    def build(
        cls,
        starting_directory: Union[str, os.PathLike],
        name: Optional[str] = None,
        content: Optional[str] = None,
        error_policy: ErrorPolicy = ErrorPolicy.SUPPRESS,
    ) -> Configuration:
        """
        Validate inputs and return a Configuration.

        Raises:
            InvalidDirectory: if `starting_directory` is not an existing directory.
            MissingCriteria: if both `name` and `content` are None.
        """
        # Directory first: it wins over MissingCriteria when both are wrong.
        start = os.fspath(starting_directory)
        _require_directory(start)

        criteria: Criteria
        if name is not None and content is not None:
            criteria = Both(name=name, content=content)
        elif name is not None:
            criteria = NameOnly(name)
        elif content is not None:
            criteria = ContentOnly(content)
        else:
            raise MissingCriteria()

        return cls(
            starting_directory=start, criteria=criteria, error_policy=error_policy
        )

    @property
    def name_substring(self) -> Optional[str]:
        c = self.criteria
        if isinstance(c, NameOnly):
            return c.substring
        if isinstance(c, ContentOnly):
            return None
        if isinstance(c, Both):
            return c.name
        raise TypeError(f"Unknown criteria: {c!r}")

    @property
    def content_substring(self) -> Optional[str]:
        c = self.criteria
        if isinstance(c, NameOnly):
            return None
        if isinstance(c, ContentOnly):
            return c.substring
        if isinstance(c, Both):
            return c.content
        raise TypeError(f"Unknown criteria: {c!r}")


@dataclass(frozen=True)
class Entry:
    """One node produced by the directory walker."""

    path: str
    name: str
    is_file: bool


@dataclass(frozen=True)
class FileMatch:
    path: str


class FailureKind(Enum):
    NOT_FOUND = "not-found"
    PERMISSION_DENIED = "permission-denied"
    DECODING = "decoding"
    OTHER_IO = "other-io"

    @classmethod
    def classify(cls, exc: BaseException) -> FailureKind:
        # UnicodeDecodeError is a ValueError, never an OSError
        if isinstance(exc, UnicodeDecodeError):
            return cls.DECODING
        if isinstance(exc, FileNotFoundError):
            return cls.NOT_FOUND
        if isinstance(exc, PermissionError):
            return cls.PERMISSION_DENIED
        return cls.OTHER_IO


@dataclass(frozen=True)
class ReadFailure:
    """A content-read error on a file that was a candidate for content matching."""

    path: str
    kind: FailureKind
    message: str

    @classmethod
    def from_exception(cls, path: str, exc: BaseException) -> ReadFailure:
        return cls(path=path, kind=FailureKind.classify(exc), message=str(exc))

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class Verdict(Enum):
    MATCH = "match"
    NO_MATCH = "no-match"


# Entry filter result: a verdict, or the failure that prevented one.
Outcome = Union[Verdict, ReadFailure]


@dataclass
class ResultSet:
    """Aggregated result of one run; built by the search service, read by the reporter."""

    matches: list[FileMatch] = field(default_factory=list)
    errors: list[ReadFailure] = field(default_factory=list)
    files_scanned: int = 0

    @property
    def match_count(self) -> int:
        return len(self.matches)

    @property
    def error_count(self) -> int:
        return len(self.errors)
