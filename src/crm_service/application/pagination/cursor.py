"""Cursor-based pagination helpers.

Cursor format: base64url('{"createdAt":"<iso-timestamp>","id":"<uuid>"}'), padding stripped.

Tokens are validated by shape only (no signature). Anything that does not decode
to a well-formed UUID and ISO-8601 timestamp is rejected before it can reach a
storage query.
"""
from __future__ import annotations

import base64
import json
import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

logger = logging.getLogger(__name__)

MAX_CURSOR_LENGTH = 500

_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)
_ISO_DATETIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")

_CURSOR_KEYS = frozenset({"createdAt", "id"})
_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


@dataclass(frozen=True, slots=True)
class CursorPosition:
    """Position of the last row seen: its sort timestamp and id, both as strings."""

    created_at: str
    id: str

    def encode(self) -> str:
        return encode_cursor(self.created_at, self.id)

    def created_at_value(self) -> datetime:
        ts = datetime.fromisoformat(self.created_at)
        if ts.tzinfo is None:
            ts = ts.replace(tzinfo=timezone.utc)
        return ts

    def id_value(self) -> UUID:
        return UUID(self.id)


def _isoformat(ts: datetime | str) -> str:
    if isinstance(ts, str):
        return ts
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.isoformat()


def encode_cursor(created_at: datetime | str, uid: UUID | str) -> str:
    raw = json.dumps(
        {"createdAt": _isoformat(created_at), "id": str(uid)},
        separators=(",", ":"),
    )
    cursor = base64.urlsafe_b64encode(raw.encode()).decode()
    return cursor.rstrip("=")


def decode_cursor(cursor: str) -> CursorPosition | None:
    """Return the position carried by ``cursor``, or None if it is malformed."""
    if len(cursor) > MAX_CURSOR_LENGTH:
        logger.debug("Rejected cursor: length %d exceeds %d", len(cursor), MAX_CURSOR_LENGTH)
        return None

    # Standard-alphabet characters and explicit padding are not part of the format
    if not _BASE64URL_RE.fullmatch(cursor):
        logger.debug("Rejected cursor: characters outside the base64url alphabet")
        return None

    padded = cursor + "=" * ((4 - len(cursor) % 4) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded).decode()
        data = json.loads(raw)
    except ValueError:
        # binascii.Error, UnicodeDecodeError and JSONDecodeError are all ValueErrors
        logger.debug("Rejected cursor: not base64url-encoded JSON")
        return None

    if not isinstance(data, dict) or data.keys() != _CURSOR_KEYS:
        logger.debug("Rejected cursor: unexpected structure")
        return None

    created_at, uid = data["createdAt"], data["id"]
    if not isinstance(created_at, str) or not isinstance(uid, str):
        logger.debug("Rejected cursor: non-string fields")
        return None

    if not _UUID_RE.fullmatch(uid):
        logger.debug("Rejected cursor: id is not a UUID")
        return None

    if not _ISO_DATETIME_RE.match(created_at):
        logger.debug("Rejected cursor: createdAt is not an ISO-8601 date-time")
        return None
    try:
        datetime.fromisoformat(created_at)
    except ValueError:
        logger.debug("Rejected cursor: createdAt is not a real date")
        return None

    return CursorPosition(created_at=created_at, id=uid)
