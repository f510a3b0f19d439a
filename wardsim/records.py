"""Loading the patient registry from CSV and writing the event log."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from types import TracebackType
from typing import IO

from wardsim.patient import Patient
from wardsim.structures import PatientTable

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_EVENT_WIDTH = 16


def _atoi(token: str) -> int:
    """Parse a leading integer the lenient way: junk or nothing yields 0."""
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


class _Tokens:
    """Splits a line on delimiter characters, skipping empty fields."""

    def __init__(self, text: str) -> None:
        self._rest = text

    def next(self, delimiters: str) -> str | None:
        rest = self._rest.lstrip(delimiters)
        if not rest:
            self._rest = ""
            return None
        match = re.search(f"[{re.escape(delimiters)}]", rest)
        if match is None:
            self._rest = ""
            return rest
        self._rest = rest[match.end():]
        return rest[: match.start()]


def _parse_line(line: str) -> Patient:
    tokens = _Tokens(line)
    patient = Patient(id="")
    if (token := tokens.next(";")) is not None:
        patient.id = token
    if (token := tokens.next(";")) is not None:
        patient.full_name = token
    if (token := tokens.next(";")) is not None:
        patient.age = _atoi(token)
    if (token := tokens.next(";")) is not None:
        patient.sex = token[0]
    if (token := tokens.next(";")) is not None:
        patient.cpf = token
    if (token := tokens.next(";")) is not None:
        patient.priority = _atoi(token)
    if (token := tokens.next("\n")) is not None:
        patient.attended = _atoi(token) != 0
    return patient


def load_patients_csv(path: str | Path, table: PatientTable) -> int:
    """Load ``;``-separated patients (header line skipped) into ``table``.

    Returns the number of patients inserted. Blank lines are ignored.
    """
    count = 0
    with open(path, encoding="utf-8") as handle:
        next(handle, None)
        for line in handle:
            if not line.strip():
                continue
            table.insert(_parse_line(line))
            count += 1
    return count


def format_entry(event: str, details: str) -> str:
    """Format one log line: padded event name and details, or details alone."""
    if event:
        return f"{event:<{_EVENT_WIDTH}} - {details}\n"
    return f"{details}\n"


class EventLog:
    """Writes each event to an output stream and, if opened, to a log file."""

    def __init__(self, path: str | Path | None = None, out: IO[str] | None = None) -> None:
        self._file: IO[str] | None = (
            open(path, "w", encoding="utf-8") if path is not None else None
        )
        self._out = out

    def record(self, event: str, details: str) -> str:
        """Emit the entry and return the formatted line."""
        message = format_entry(event, details)
        out = self._out if self._out is not None else sys.stdout
        out.write(message)
        if self._file is not None:
            self._file.write(message)
            self._file.flush()
        return message

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> EventLog:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()