"""
CSV Exporter for approved submissions.

Quoting follows csv.QUOTE_MINIMAL: a field is quoted only when it
contains the separator, a quote or a line break, and embedded quotes
are doubled.
"""

import csv
import io
from datetime import date, datetime
from typing import Any, Dict, Iterable, List

from experience_board.core.errors import NoDataError

CSV_HEADERS = [
    "ID",
    "Student Name",
    "LinkedIn URL",
    "Company",
    "Position",
    "Interview Dates",
    "Phone Screens",
    "Technical Interviews",
    "Behavioral Interviews",
    "Other Interviews",
    "Interview Questions",
    "Advice/Tips",
    "Anonymous",
    "Status",
    "Created At",
]


def format_interview_dates(interview_dates: Iterable[Dict[str, Any]]) -> str:
    """[{label, date}, ...] -> 'label: date; label: date'"""
    return "; ".join(f"{d.get('label', '')}: {d.get('date', '')}" for d in interview_dates or [])


def _format_timestamp(value: Any) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    return "" if value is None else str(value)


def _row(record: Dict[str, Any]) -> List[Any]:
    return [
        record["id"],
        record["student_name"],
        record["linkedin_url"],
        record["company"],
        record["position"],
        format_interview_dates(record.get("interview_dates")),
        record.get("phone_screens", 0),
        record.get("technical_interviews", 0),
        record.get("behavioral_interviews", 0),
        record.get("other_interviews", 0),
        record["interview_questions"],
        record["advice_tips"],
        "yes" if record.get("is_anonymous") else "no",
        record["status"],
        _format_timestamp(record.get("created_at")),
    ]


def build_csv(records: List[Dict[str, Any]]) -> str:
    """
    Serialize records to CSV with one header row.

    Raises:
        NoDataError: if there is nothing to export
    """
    if not records:
        raise NoDataError()

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for record in records:
        writer.writerow(_row(record))
    return buffer.getvalue()


def export_filename(day: date) -> str:
    return f"interview-experiences-{day.isoformat()}.csv"
