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


class FsearchError(Exception):
    """Base exception for domain-specific errors."""


class ConfigurationError(FsearchError):
    """Bad CLI args or an unusable search configuration."""


class InvalidDirectory(ConfigurationError):
    """The starting directory does not exist or is not a directory."""

    def __init__(self, path: str) -> None:
        super().__init__(f"{path} is not a valid directory.")
        self.path = path


class MissingCriteria(ConfigurationError):
    """Neither a file-name nor a content substring was supplied."""

    def __init__(self) -> None:
        super().__init__(
            "Both file name and content are missing. Please provide at least one!"
        )
