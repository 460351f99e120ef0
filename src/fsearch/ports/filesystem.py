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

from abc import ABC, abstractmethod
from typing import BinaryIO, Iterator

from ..domain.models import Entry


class FilesystemPort(ABC):
    """Abstract interface for filesystem access."""

    @abstractmethod
    def walk(self, root: str) -> Iterator[Entry]:
        """
        Lazily yield entries under `root`, depth-first.

        Entries the walker cannot list or stat are dropped, never raised.
        """
        raise NotImplementedError

    @abstractmethod
    def open_binary(self, path: str) -> BinaryIO:
        """Open a file for binary reading. Usable as a context manager."""
        raise NotImplementedError
