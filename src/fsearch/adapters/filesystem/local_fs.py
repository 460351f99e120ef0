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
import os
from typing import BinaryIO, Iterator

from ...domain.models import Entry
from ...ports.filesystem import FilesystemPort

logger = logging.getLogger(__name__)


class LocalFS(FilesystemPort):
    """
    Local filesystem adapter built on `os.scandir`.

    - Depth-first, pre-order: a directory is yielded, then its whole subtree,
      before the next entry of its parent.
    - Symlinks are reported but never followed, so link cycles cannot occur.
    - Order is whatever `os.scandir` returns; it is not sorted.
    """

    def walk(self, root: str) -> Iterator[Entry]:
        # One pending-children iterator per open directory level.
        stack = [self._children(os.fspath(root))]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                continue

            try:
                is_file = child.is_file(follow_symlinks=False)
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError as e:
                logger.debug("LocalFS.walk: cannot stat %s: %s", child.path, e)
                continue

            yield Entry(path=child.path, name=child.name, is_file=is_file)
            if is_dir:
                stack.append(self._children(child.path))

    @staticmethod
    def _children(directory: str) -> Iterator[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                return iter(list(it))
        except OSError as e:
            logger.debug("LocalFS.walk: cannot list %s: %s", directory, e)
            return iter(())

    def open_binary(self, path: str) -> BinaryIO:
        return open(path, "rb")
