"""Structured classification of database integrity errors.

Django wraps every driver exception in ``django.db.IntegrityError`` and
keeps the original one in ``__cause__``. Each backend reports the failing
constraint differently, so the classification is done here, once, at the
store boundary:

- PostgreSQL (psycopg 2/3): SQLSTATE ``23505`` (unique) / ``23502`` (not null).
- MySQL / MariaDB: errno ``1062`` (duplicate entry) / ``1048`` (column cannot be null).
- SQLite: extended error name ``SQLITE_CONSTRAINT_UNIQUE`` /
  ``SQLITE_CONSTRAINT_NOTNULL`` (Python >= 3.11), falling back to the
  ``"UNIQUE constraint failed: table.column"`` message prefix.

Callers only ever see a ``ConstraintViolation`` with a ``ConstraintKind``
and, when the backend reports it, the offending column.
"""

from __future__ import annotations

import re
from enum import StrEnum

from django.db import IntegrityError


class ConstraintKind(StrEnum):
    UNIQUE = "unique"
    NOT_NULL = "not_null"
    OTHER = "other"


_PG_SQLSTATES = {
    "23505": ConstraintKind.UNIQUE,
    "23502": ConstraintKind.NOT_NULL,
}

_MYSQL_ERRNOS = {
    1062: ConstraintKind.UNIQUE,
    1048: ConstraintKind.NOT_NULL,
}

_SQLITE_ERROR_NAMES = {
    "SQLITE_CONSTRAINT_UNIQUE": ConstraintKind.UNIQUE,
    "SQLITE_CONSTRAINT_PRIMARYKEY": ConstraintKind.UNIQUE,
    "SQLITE_CONSTRAINT_NOTNULL": ConstraintKind.NOT_NULL,
}

_SQLITE_MESSAGE = re.compile(
    r"^(?P<kind>UNIQUE|NOT NULL) constraint failed: (?P<columns>.+)$"
)
_PG_KEY_DETAIL = re.compile(r"Key \((?P<column>[^)]+)\)=")
_MYSQL_DUPLICATE_KEY = re.compile(r"for key '(?:[\w]+\.)?(?P<key>[\w]+)'")
_MYSQL_NULL_COLUMN = re.compile(r"Column '(?P<column>[\w]+)' cannot be null")


class ConstraintViolation(Exception):
    """A write was rejected by a uniqueness or not-null rule (or another constraint)."""

    def __init__(self, kind: ConstraintKind, column: str | None = None, detail: str = "") -> None:
        self.kind = kind
        self.column = column
        self.detail = detail
        super().__init__(f"{kind} constraint violated" + (f" on {column}" if column else ""))

    @classmethod
    def from_integrity_error(cls, exc: IntegrityError) -> ConstraintViolation:
        kind, column = classify_integrity_error(exc)
        return cls(kind, column, detail=str(exc))


def _column_from_qualified(name: str) -> str:
    """``customer.email`` -> ``email``."""
    return name.strip().rsplit(".", 1)[-1]


def _classify_postgres(cause) -> tuple[ConstraintKind, str | None] | None:
    sqlstate = getattr(cause, "sqlstate", None) or getattr(cause, "pgcode", None)
    if sqlstate is None:
        return None
    kind = _PG_SQLSTATES.get(sqlstate, ConstraintKind.OTHER)

    column = None
    diag = getattr(cause, "diag", None)
    if diag is not None:
        column = getattr(diag, "column_name", None)
        if column is None:
            match = _PG_KEY_DETAIL.search(getattr(diag, "message_detail", None) or "")
            if match:
                column = match.group("column")
    return kind, column


def _classify_mysql(cause) -> tuple[ConstraintKind, str | None] | None:
    args = getattr(cause, "args", ())
    if not args or not isinstance(args[0], int):
        return None
    kind = _MYSQL_ERRNOS.get(args[0], ConstraintKind.OTHER)
    message = str(args[1]) if len(args) > 1 else ""

    column = None
    match = _MYSQL_NULL_COLUMN.search(message) or _MYSQL_DUPLICATE_KEY.search(message)
    if match:
        column = match.groupdict().get("column") or match.groupdict().get("key")
    return kind, column


def _classify_sqlite(cause, message: str) -> tuple[ConstraintKind, str | None]:
    kind = _SQLITE_ERROR_NAMES.get(getattr(cause, "sqlite_errorname", None) or "")

    column = None
    match = _SQLITE_MESSAGE.match(message.strip())
    if match:
        if kind is None:
            kind = (
                ConstraintKind.UNIQUE
                if match.group("kind") == "UNIQUE"
                else ConstraintKind.NOT_NULL
            )
        # Composite unique constraints list several columns; report the first.
        column = _column_from_qualified(match.group("columns").split(",")[0])
    return kind or ConstraintKind.OTHER, column


def classify_integrity_error(exc: IntegrityError) -> tuple[ConstraintKind, str | None]:
    """Return the ``(kind, column)`` pair describing ``exc``."""
    cause = exc.__cause__ or exc

    for classifier in (_classify_postgres, _classify_mysql):
        result = classifier(cause)
        if result is not None:
            return result

    return _classify_sqlite(cause, str(cause))
