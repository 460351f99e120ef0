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

import logging
from typing import Iterator, Tuple

from ..domain.models import (
    Configuration,
    Entry,
    ErrorPolicy,
    FileMatch,
    Outcome,
    ReadFailure,
    ResultSet,
    Verdict,
)
from ..ports.filesystem import FilesystemPort
from .entry_filter import EntryFilter

logger = logging.getLogger(__name__)


class SearchService:
    """
    Orchestrates a search:
      - walks the tree under the configured starting directory
      - hands every regular file to an EntryFilter
      - collects matches (walk order) and, under ErrorPolicy.SURFACE, read failures

    Note:
      * Walker-level errors (unlistable directories) never reach this service;
        the FilesystemPort drops them regardless of the error policy.
      * There is no early exit: the whole subtree is scanned on every run.
    """

    def __init__(self, fs: FilesystemPort) -> None:
        self._fs = fs

    def iter_outcomes(self, config: Configuration) -> Iterator[Tuple[Entry, Outcome]]:
        """Yield (entry, outcome) for each regular file, as the walk discovers it."""
        entry_filter = EntryFilter(self._fs, config.criteria)
        for entry in self._fs.walk(config.starting_directory):
            if not entry.is_file:
                continue
            yield entry, entry_filter.classify(entry)

    def search(self, config: Configuration) -> ResultSet:
        """
        Run a full search for `config`.

        Returns:
            ResultSet with matches in discovery order.
        """
        result = ResultSet()
        surface = config.error_policy is ErrorPolicy.SURFACE

        for entry, outcome in self.iter_outcomes(config):
            result.files_scanned += 1
            if outcome is Verdict.MATCH:
                result.matches.append(FileMatch(path=entry.path))
            elif isinstance(outcome, ReadFailure):
                if surface:
                    result.errors.append(outcome)
                else:
                    logger.debug("SearchService: suppressed read failure: %s", outcome)

        logger.info(
            "SearchService.search: scanned %d files under %s; %d matches, %d errors",
            result.files_scanned,
            config.starting_directory,
            result.match_count,
            result.error_count,
        )
        return result
