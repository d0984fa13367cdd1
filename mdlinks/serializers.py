"""
Output rendering for extracted links: JSON or delimited text.
"""
import csv
import io
import json
from typing import Iterable, List, Sequence, TextIO

from .models import LinkRecord

FIELD_NAMES = ("description", "url", "source_file")
DEFAULT_FIELDS = FIELD_NAMES
FORMATS = ("csv", "json")


class SerializationError(ValueError):
    """Raised for an invalid separator, field list or output format."""


def validate_separator(separator: str) -> str:
    if not isinstance(separator, str) or len(separator) != 1:
        raise SerializationError(
            f"Separator must be a single character, got {separator!r}"
        )
    if separator in ('"', "\r", "\n"):
        raise SerializationError(f"Separator cannot be {separator!r}")
    return separator


def validate_fields(fields: Sequence[str]) -> List[str]:
    fields = list(fields)
    if not fields:
        raise SerializationError("At least one output field is required")
    unknown = [f for f in fields if f not in FIELD_NAMES]
    if unknown:
        raise SerializationError(
            f"Unknown field(s): {', '.join(unknown)} (expected {', '.join(FIELD_NAMES)})"
        )
    return fields


def to_json(records: Iterable[LinkRecord], indent: int = 2) -> str:
    """Render records as a pretty-printed JSON array."""
    return json.dumps([r.to_dict() for r in records], indent=indent, ensure_ascii=False)


def to_delimited(
    records: Iterable[LinkRecord],
    separator: str = ",",
    fields: Sequence[str] = DEFAULT_FIELDS,
    header: bool = True,
) -> str:
    """
    Render records as delimited text, one record per line.

    Args:
        records: Records to render
        separator: Single-character field separator
        fields: Field names to emit, in column order
        header: Whether to write a header row naming the fields

    Returns:
        The delimited text, newline terminated

    Raises:
        SerializationError: If the separator or field list is invalid
    """
    separator = validate_separator(separator)
    fields = validate_fields(fields)

    buf = io.StringIO()
    writer = csv.writer(buf, delimiter=separator, lineterminator="\n")
    if header:
        writer.writerow(fields)
    for record in records:
        row = record.to_dict()
        writer.writerow([row[f] for f in fields])
    return buf.getvalue()


def write_records(
    records: Iterable[LinkRecord],
    stream: TextIO,
    fmt: str = "csv",
    separator: str = ",",
    fields: Sequence[str] = DEFAULT_FIELDS,
    header: bool = True,
    json_indent: int = 2,
) -> None:
    """Write records to a text stream in the requested format."""
    if fmt == "json":
        stream.write(to_json(records, indent=json_indent))
        stream.write("\n")
    elif fmt == "csv":
        stream.write(to_delimited(records, separator=separator, fields=fields, header=header))
    else:
        raise SerializationError(f"Unknown output format {fmt!r} (expected one of {', '.join(FORMATS)})")
