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

import logging

from ..domain.models import (
    Both,
    ContentOnly,
    Criteria,
    Entry,
    NameOnly,
    Outcome,
    ReadFailure,
    Verdict,
)
from ..ports.filesystem import FilesystemPort

logger = logging.getLogger(__name__)


def _strip_terminator(raw: bytes) -> bytes:
    """Drop a single trailing "\\n" or "\\r\\n", nothing more."""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


class EntryFilter:
    """
    Classifies a single walker entry against the search criteria.

    The result is always one of Verdict.MATCH, Verdict.NO_MATCH or a
    ReadFailure; I/O and decoding errors never escape `classify`.

    Under `Both`, the name is checked first and the file is only opened
    when the name matches.
    """

    def __init__(self, fs: FilesystemPort, criteria: Criteria) -> None:
        self._fs = fs
        self._criteria = criteria

    def classify(self, entry: Entry) -> Outcome:
        if not entry.is_file:
            return Verdict.NO_MATCH

        c = self._criteria
        if isinstance(c, NameOnly):
            return self._verdict(self._name_matches(entry, c.substring))
        if isinstance(c, ContentOnly):
            return self._content_outcome(entry, c.substring)
        if isinstance(c, Both):
            if not self._name_matches(entry, c.name):
                return Verdict.NO_MATCH
            return self._content_outcome(entry, c.content)
        raise TypeError(f"Unknown criteria: {c!r}")

    @staticmethod
    def _verdict(matched: bool) -> Verdict:
        return Verdict.MATCH if matched else Verdict.NO_MATCH

    @staticmethod
    def _name_matches(entry: Entry, substring: str) -> bool:
        return substring in entry.name

    def _content_outcome(self, entry: Entry, substring: str) -> Outcome:
        try:
            return self._verdict(self._content_matches(entry.path, substring))
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("EntryFilter: read failed for %s: %s", entry.path, e)
            return ReadFailure.from_exception(entry.path, e)

    def _content_matches(self, path: str, substring: str) -> bool:
        # Lines are decoded one at a time, so a match before an undecodable
        # line still counts.
        with self._fs.open_binary(path) as fh:
            for raw in fh:
                line = _strip_terminator(raw).decode("utf-8")
                if substring in line:
                    return True
        return False
