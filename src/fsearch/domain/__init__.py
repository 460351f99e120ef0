from .errors import (
    ConfigurationError,
    FsearchError,
    InvalidDirectory,
    MissingCriteria,
)
from .models import (
    Both,
    Configuration,
    ContentOnly,
    Criteria,
    Entry,
    ErrorPolicy,
    FailureKind,
    FileMatch,
    NameOnly,
    Outcome,
    ReadFailure,
    ResultSet,
    Verdict,
)

__all__ = [
    "Both",
    "Configuration",
    "ConfigurationError",
    "ContentOnly",
    "Criteria",
    "Entry",
    "ErrorPolicy",
    "FailureKind",
    "FileMatch",
    "FsearchError",
    "InvalidDirectory",
    "MissingCriteria",
    "NameOnly",
    "Outcome",
    "ReadFailure",
    "ResultSet",
    "Verdict",
]
