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

import csv
import json
from pathlib import Path
from typing import Any, Callable, Optional, TextIO

from ..domain.models import ResultSet

# style(text, ok) -> decorated text; used by the CLI for colour.
Styler = Callable[[str, bool], str]

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1


def _plain(text: str, ok: bool) -> str:
    return text


def printable(text: str) -> str:
    """
    Lossy rendering of a path for output streams and exports.

    Undecodable filename bytes (surrogate-escaped by os.scandir) become U+FFFD.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "replace")
    return raw.decode("utf-8", "replace")


class ReportService:
    """
    Renders a ResultSet for humans and machines.

    Notes:
      - `emit` writes matched paths to `out` and headers/errors to `err`,
        and returns the process exit status instead of exiting.
      - `write_results` exports JSON (default), NDJSON or CSV.
    """

    @staticmethod
    def exit_status(result: ResultSet) -> int:
        # Surfaced errors never change the status.
        return EXIT_FOUND if result.match_count else EXIT_NOT_FOUND

    @staticmethod
    def match_header(count: int) -> str:
        if count == 0:
            return "No matches found."
        if count == 1:
            return "Found 1 match:"
        return f"Found {count} matches:"

    @staticmethod
    def error_header(count: int) -> str:
        if count == 1:
            return "Found 1 error:"
        return f"Found {count} errors:"

    def emit(
        self,
        result: ResultSet,
        out: TextIO,
        err: TextIO,
        style: Optional[Styler] = None,
    ) -> int:
        style = style or _plain

        err.write(style(self.match_header(result.match_count), bool(result.matches)) + "\n")
        for match in result.matches:
            out.write(printable(match.path) + "\n")
        out.flush()

        if result.errors:
            err.write("\n" + style(self.error_header(result.error_count), False) + "\n")
            for failure in result.errors:
                err.write(printable(str(failure)) + "\n")
        err.flush()

        return self.exit_status(result)

    def write_results(self, result: ResultSet, out: Path, fmt: str = "json") -> Path:
        """
        Write `result` to `out` in the specified format.

        Returns:
            The path written.

        Raises:
            ValueError: if an unsupported format is requested.
        """
        fmt = (fmt or "json").lower()
        matches = [{"path": printable(m.path)} for m in result.matches]
        errors = [
            {
                "path": printable(e.path),
                "kind": e.kind.value,
                "message": printable(e.message),
            }
            for e in result.errors
        ]

        if fmt not in ("json", "ndjson", "csv"):
            raise ValueError(f"Unsupported format: {fmt}")

        out.parent.mkdir(parents=True, exist_ok=True)

        if fmt == "json":
            payload = {"matches": matches, "errors": errors}
            out.write_text(
                json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8"
            )
            return out

        records: list[dict[str, Any]] = [{"type": "match", **m} for m in matches]
        records += [{"type": "error", **e} for e in errors]

        if fmt == "ndjson":
            lines = (json.dumps(rec, ensure_ascii=False) for rec in records)
            text = "\n".join(lines)
            out.write_text(text + ("\n" if text else ""), encoding="utf-8")
            return out

        fieldnames = ["type", "path", "kind", "message"]
        with open(out, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for rec in records:
                writer.writerow(rec)
        return out
