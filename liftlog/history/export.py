"""CSV export of the training log.

Read-only: no recomputation, no mutation - log entries in, CSV text out.
"""

import csv
import io
import json

from loguru import logger

from liftlog.history.log import LogEntry

CSV_FIELDS = ["date", "session", "item", "logType", "result", "clean", "notes"]


def export_log_csv(log: list[LogEntry]) -> str:
    """Export log entries to CSV, oldest first.

    Row fields are quoted; the result record is embedded as JSON and the
    clean flag as 1/0.

    Args:
        log: Log entries

    Returns:
        CSV text
    """
    output = io.StringIO()
    # Header is written bare; rows are fully quoted
    output.write(",".join(CSV_FIELDS) + "\n")
    writer = csv.DictWriter(output, fieldnames=CSV_FIELDS, quoting=csv.QUOTE_ALL, lineterminator="\n")

    for entry in sorted(log, key=lambda e: e.ts):
        writer.writerow(
            {
                "date": entry.date,
                "session": entry.session_label,
                "item": entry.item_name,
                "logType": entry.log_type,
                "result": json.dumps(entry.result, separators=(",", ":")),
                "clean": "1" if entry.clean else "0",
                "notes": entry.notes,
            }
        )

    logger.info(f"Exported {len(log)} log entries to CSV")
    return output.getvalue()
