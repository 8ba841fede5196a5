from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, List, Optional

import mysql.connector

from ..common.datetime_utils import ensure_utc
from ..core.constants import MYSQL_DUPLICATE_ENTRY_ERRNO
from ..core.exceptions import DuplicateKeyError, RecordRejectedError, StorageUnavailableError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True, collection: str = "?"):
    """Yield (conn, cursor); commit on success, rollback on error.

    mysql-connector errors are translated into the store's own exceptions:
    a violated unique index becomes DuplicateKeyError, a value the column
    cannot hold becomes RecordRejectedError, and a dropped connection becomes
    StorageUnavailableError. Anything else propagates unchanged.
    """
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.IntegrityError as e:
        conn.rollback()
        if e.errno == MYSQL_DUPLICATE_ENTRY_ERRNO:
            raise DuplicateKeyError(collection, _duplicate_key_name(e)) from e
        raise
    except mysql.connector.DataError as e:
        conn.rollback()
        raise RecordRejectedError(str(e)) from e
    except (mysql.connector.InterfaceError, mysql.connector.OperationalError) as e:
        raise StorageUnavailableError(str(e)) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def _duplicate_key_name(error: mysql.connector.Error) -> str:
    # "Duplicate entry 'x' for key 'students.uq_students_student_id'"
    msg = str(getattr(error, "msg", "") or "")
    marker = "for key '"
    if marker in msg:
        return msg.split(marker, 1)[1].rstrip("'").split(".")[-1]
    return "unique key"


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_db_datetime(value: datetime) -> datetime:
    """DATETIME columns hold naive UTC."""
    return ensure_utc(value).replace(tzinfo=None)


def from_db_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str):
        return ensure_utc(datetime.fromisoformat(value))
    raise TypeError(f"Unsupported MySQL DATETIME value type: {type(value)!r}")
