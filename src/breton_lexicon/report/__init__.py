from .summary import (
    format_anomalies,
    format_errors,
    format_lexicon,
    format_missing_report,
    format_summary,
    format_tag_report,
)

__all__ = [
    "format_anomalies",
    "format_errors",
    "format_lexicon",
    "format_missing_report",
    "format_summary",
    "format_tag_report",
]
