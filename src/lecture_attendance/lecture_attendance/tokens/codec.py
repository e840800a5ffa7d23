from __future__ import annotations

import hashlib
import hmac
import string
import urllib.parse
from dataclasses import dataclass
from datetime import datetime
from typing import Union

from ..common.datetime_utils import from_epoch_seconds, to_epoch_seconds
from ..core.constants import TOKEN_SEPARATOR, TOKEN_TAG_LENGTH, TOKEN_VERSION
from ..sessions.model import AttendanceSession

_HEX = frozenset(string.hexdigits.lower())
_FIELD_COUNT = 6
_MAX_EXPIRY_DIGITS = 12


@dataclass(frozen=True)
class TokenPayload:
    """Parsed content of a scanned attendance code. The tag is not yet verified."""

    session_id: str
    course_id: str
    issuer_id: str
    expires_at: datetime
    tag: str


@dataclass(frozen=True)
class MalformedPayload:
    detail: str


DecodeResult = Union[TokenPayload, MalformedPayload]


def _quote(value: str) -> str:
    return urllib.parse.quote(value, safe="")


class TokenCodec:
    """Turns sessions into scannable payload strings and back.

    Format: ATT1|<session id>|<course id>|<issuer id>|<expiry epoch seconds>|<tag>

    Ids are percent-encoded. The tag is a truncated HMAC-SHA256 over everything
    before it, so only holders of the secret can mint codes. Precision of the
    expiry is whole seconds.
    """

    def __init__(self, secret: Union[str, bytes]):
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret

    def _signed_part(self, session_id: str, course_id: str, issuer_id: str, expiry: int) -> str:
        return TOKEN_SEPARATOR.join(
            [TOKEN_VERSION, _quote(session_id), _quote(course_id), _quote(issuer_id), str(expiry)]
        )

    def _tag_for(self, signed_part: str) -> str:
        digest = hmac.new(self._secret, signed_part.encode("utf-8"), hashlib.sha256).hexdigest()
        return digest[:TOKEN_TAG_LENGTH]

    def compute_tag(self, *, session_id: str, course_id: str, issuer_id: str, expires_at: datetime) -> str:
        return self._tag_for(self._signed_part(session_id, course_id, issuer_id, to_epoch_seconds(expires_at)))

    def encode(self, session: AttendanceSession) -> str:
        signed = self._signed_part(
            session.session_id,
            session.course_id,
            session.issuer_id,
            to_epoch_seconds(session.expires_at),
        )
        return f"{signed}{TOKEN_SEPARATOR}{self._tag_for(signed)}"

    def decode(self, raw) -> DecodeResult:
        """Parse a raw scanned string. Never raises; garbage yields MalformedPayload."""

        if not isinstance(raw, str):
            return MalformedPayload("payload is not text")

        parts = raw.strip().split(TOKEN_SEPARATOR)
        if len(parts) != _FIELD_COUNT:
            return MalformedPayload("unexpected field count")

        version, q_session, q_course, q_issuer, expiry_s, tag = parts
        if version != TOKEN_VERSION:
            return MalformedPayload("unknown version")

        ids = [_unquote_canonical(q) for q in (q_session, q_course, q_issuer)]
        if not all(ids):
            return MalformedPayload("invalid identifier")

        if (
            not expiry_s.isascii()
            or not expiry_s.isdigit()
            or len(expiry_s) > _MAX_EXPIRY_DIGITS
            or str(int(expiry_s)) != expiry_s
        ):
            return MalformedPayload("invalid expiry")

        if len(tag) != TOKEN_TAG_LENGTH or not set(tag) <= _HEX:
            return MalformedPayload("invalid tag")

        try:
            expires_at = from_epoch_seconds(int(expiry_s))
        except (OverflowError, OSError, ValueError):
            return MalformedPayload("expiry out of range")

        session_id, course_id, issuer_id = ids
        return TokenPayload(
            session_id=session_id,
            course_id=course_id,
            issuer_id=issuer_id,
            expires_at=expires_at,
            tag=tag,
        )

    def verify(self, payload: TokenPayload) -> bool:
        expected = self.compute_tag(
            session_id=payload.session_id,
            course_id=payload.course_id,
            issuer_id=payload.issuer_id,
            expires_at=payload.expires_at,
        )
        return hmac.compare_digest(expected, payload.tag)


def _unquote_canonical(quoted: str) -> str:
    """Unquote an id field; returns "" unless `quoted` is the exact encoding we emit."""

    if not quoted or not quoted.isascii():
        return ""
    try:
        value = urllib.parse.unquote(quoted, errors="strict")
    except UnicodeDecodeError:
        return ""
    if _quote(value) != quoted:
        return ""
    return value
