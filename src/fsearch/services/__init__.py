from .entry_filter import EntryFilter
from .search_service import SearchService
from .report_service import ReportService


__all__ = [
    'EntryFilter',
    'SearchService',
    'ReportService',
]
