from __future__ import annotations

from models.person_record import PersonRecord


FIELD_LABELS = [
    ("name", "Name"),
    ("birthday_year", "Birthday Year"),
    ("age", "Age"),
    ("email", "Email"),
    ("phone", "Phone"),
]


def format_record(record: PersonRecord) -> str:
    """Render the record's five fields, one per line, in declaration order."""
    lines = ["=" * 40, "PERSON RECORD", "=" * 40]
    for attr, label in FIELD_LABELS:
        lines.append(f"{label}: {getattr(record, attr)}")
    lines.append("=" * 40)
    return "\n".join(lines)


def format_failure(step_name: str, error: Exception) -> str:
    return f"{step_name} fail with err = {error}"


def print_record(record: PersonRecord) -> None:
    print(format_record(record))
