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
import sys
from pathlib import Path
from typing import Optional

import typer

from ..adapters.filesystem.local_fs import LocalFS
from ..domain.errors import ConfigurationError
from ..domain.models import Configuration, ErrorPolicy
from ..services import ReportService, SearchService
from ..services.report_service import Styler

from ..logging_config import setup_logging

setup_logging()

app = typer.Typer(help="fsearch - find files by name and/or content substring")

FORMATS: set[str] = {"json", "ndjson", "csv"}

EXIT_CONFIG_ERROR = 2

logger = logging.getLogger(__name__)


def _styler(stream) -> Optional[Styler]:
    """Colour headers only when writing to a terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return None

    def style(text: str, ok: bool) -> str:
        return typer.style(text, fg=typer.colors.GREEN if ok else typer.colors.RED)

    return style


def _resolve_out(out: Path, fmt: str) -> Path:
    # --out DIR -> DIR/results.<fmt>; anything else is treated as a file path
    if out.exists() and out.is_dir():
        return out / f"results.{fmt}"
    return out


@app.command()
def search(
    start_dir: str = typer.Option(
        ".",
        "--dir",
        "-d",
        "--directory",
        "--start",
        "--start-dir",
        help="Start directory where the search begins its recursive descent.",
    ),
    file_name: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        "--filename",
        help="Substring that must be contained in the file name.",
    ),
    content: Optional[str] = typer.Option(
        None,
        "--content",
        "-c",
        help="Substring that must be contained in some line of the file.",
    ),
    errors: bool = typer.Option(
        False,
        "--errors",
        "-e",
        "--error",
        help="Show I/O errors for file content checks (requires --content).",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "--output",
        help="Also write results to this path. If a directory is provided, "
        "the file will be named 'results.<fmt>' inside it.",
    ),
    fmt: str = typer.Option(
        "json",
        "--fmt",
        help="Format for --out: json, ndjson or csv.",
        case_sensitive=False,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Recursively search a directory for files matching a name and/or content substring.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    if errors and content is None:
        raise typer.BadParameter("--errors requires --content", param_hint="--errors")

    fmt = fmt.lower()
    if out is not None and fmt not in FORMATS:
        raise typer.BadParameter(
            f"Unsupported format: {fmt}. Valid options: {', '.join(sorted(FORMATS))}",
            param_hint="--fmt",
        )

    policy = ErrorPolicy.SURFACE if errors else ErrorPolicy.SUPPRESS
    try:
        config = Configuration.build(
            start_dir, name=file_name, content=content, error_policy=policy
        )
    except ConfigurationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    result = SearchService(LocalFS()).search(config)

    report = ReportService()
    status = report.emit(result, sys.stdout, sys.stderr, style=_styler(sys.stderr))

    if out is not None:
        written = report.write_results(result, _resolve_out(out, fmt), fmt=fmt)
        logger.info("Wrote %s results to %s", fmt, written)

    raise typer.Exit(code=status)
