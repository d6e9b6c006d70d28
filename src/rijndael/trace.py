"""
Trace recording and pretty printing for block transforms.

TraceRecorder collects one entry per pipeline step and can
- write each entry as a JSON Lines record to a file
- print a compact line per step to stdout (verbose mode)
"""

from __future__ import annotations

import json
from typing import Any, TextIO

from .utils import format_words, state_to_hex


class TraceRecorder:
    """
    Records and outputs traces of cipher execution.

    Entries are stored as plain dicts, for example::

        {"direction": "encrypt", "round": 1, "operation": "ShiftRows",
         "state": [[...], [...], [...], [...]]}
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, bytes):
            return obj.hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        round_num = record.get("round", 0)
        operation = record.get("operation", "unknown")
        line = f"R{round_num:02d}  {operation:16s}"
        if "state" in record:
            line += f" STATE:{state_to_hex(record['state'])}"
        if "round_key" in record:
            line += f"  KEY:{format_words(record['round_key'])}"
        print(line)

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_result(label: str, output_hex: str, passed: bool | None = None) -> None:
    """Print the final block and, when checked, the reference verdict."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"{label}: {output_hex}")

    if passed is not None:
        status = "PASS" if passed else "FAIL"
        marker = "[OK]" if passed else "[ERROR]"
        print(f"Verification: {marker} {status}")
    print(f"{'='*70}")
