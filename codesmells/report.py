"""
Report Layer

Render sorted FileRecords for people (summary + count matrix)
or for tools (JSON). Rendering never reorders or filters records.
"""
import json
from typing import Dict, List, Sequence

from .data_structures import FileRecord, SmellKind

# Column order of the count matrix
MATRIX_KINDS = (
    SmellKind.LONG_METHOD,
    SmellKind.LONG_PARAM_LIST,
    SmellKind.MAGIC_ATTRIBUTE,
    SmellKind.DATA_CLASS,
)

_ABBREVIATIONS = {
    SmellKind.LONG_METHOD:     "LongMet",
    SmellKind.LONG_PARAM_LIST: "LongPar",
    SmellKind.MAGIC_ATTRIBUTE: "MagAttr",
    SmellKind.DATA_CLASS:      "DataCls",
}


def _row_label(record: FileRecord) -> str:
    return record.name or record.file_name


def format_text(records: Sequence[FileRecord]) -> str:
    total = sum(record.total_smell_count for record in records)
    lines = [f"Analyzed {len(records)} files, {total} smells."]
    lines.extend(f" - {record}" for record in records)
    return "\n".join(lines)


def format_matrix(records: Sequence[FileRecord]) -> str:
    """
    One row per file, one column per smell kind, cells are counts.

    Rows are labelled with the qualified name, or the file name when
    the file declares no namespace.
    """
    labels = [_row_label(record) for record in records]
    label_width = max([len("File")] + [len(label) for label in labels])

    header = "File".ljust(label_width) + "".join(
        f"  {_ABBREVIATIONS[kind]}" for kind in MATRIX_KINDS
    )
    rows = [header, "-" * len(header)]

    for label, record in zip(labels, records):
        cells = "".join(
            f"  {record.count_by_kind(kind):>{len(_ABBREVIATIONS[kind])}}"
            for kind in MATRIX_KINDS
        )
        rows.append(label.ljust(label_width) + cells)

    return "\n".join(rows)


def _record_to_dict(record: FileRecord) -> Dict:
    return {
        "path": record.path,
        "name": record.name,
        "total": record.total_smell_count,
        "counts": {kind.value: record.count_by_kind(kind) for kind in SmellKind},
        "findings": [
            {"kind": finding.kind.value, "line": finding.line}
            for finding in record.findings
        ],
    }


def format_json(records: Sequence[FileRecord]) -> str:
    payload: List[Dict] = [_record_to_dict(record) for record in records]
    return json.dumps(payload, indent=2)
