"""Interpretation of URL-encoded gateway replies.

Every reply is a flat ``key=value&...`` body. Three keys carry meaning:

* ``error`` holds the status code (``0`` on success);
* ``token`` holds the payment token after a successful registration;
* ``errorMessage`` holds ``code:description`` or a bare description.

Anything else is ignored, except when nothing at all could be classified: the
first field name is then matched against the error catalog once, because some
gateway errors arrive as a lone code without the ``error=`` prefix.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Final, Mapping
from urllib.parse import parse_qsl

from . import error_codes

ERROR_LABEL: Final[str] = "error"
TOKEN_LABEL: Final[str] = "token"
MESSAGE_LABEL: Final[str] = "errorMessage"

SUCCESS_CODE: Final[str] = "0"

ErrorMessages = dict[str | int, str]


@dataclass(frozen=True)
class DecodedOutcome:
    """Result of decoding one gateway reply.

    ``error_messages`` keeps insertion order; raw ``errorMessage`` values that
    were also split into ``code: description`` are stored again under integer
    keys ``0, 1, ...``.
    """

    token: str | None = None
    status_code: str | None = None
    error_messages: ErrorMessages = field(default_factory=dict)
    request_parameters: dict[str, Any] = field(default_factory=dict)
    receive_parameters: dict[str, Any] = field(default_factory=dict)
    order_id: str | None = None
    session_id: str | None = None

    @property
    def indeterminate(self) -> bool:
        """``True`` when the reply did not yield any status code."""

        return self.status_code is None

    @property
    def succeeded(self) -> bool:
        return self.status_code == SUCCESS_CODE and not self.error_messages


class _Accumulator:
    """Mutable working state of a single decode pass."""

    def __init__(self) -> None:
        self.token: str | None = None
        self.status_code: str | None = None
        self.error_messages: ErrorMessages = {}
        self.classified = False
        self._raw_index = 0

    def add_raw_message(self, message: str) -> None:
        self.error_messages[self._raw_index] = message
        self._raw_index += 1


def parse_body(body: str | bytes | None) -> dict[str, str]:
    """Split a form-encoded body into a dict; later duplicates overwrite earlier ones."""

    if body is None:
        return {}
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    # dict() keeps the position of the first occurrence and the value of the last.
    return dict(parse_qsl(body.strip(), keep_blank_values=True))


def split_message(message: str) -> tuple[str, str] | None:
    """Return ``(code, description)`` for ``code:description`` messages."""

    if ":" not in message:
        return None
    code, description = message.split(":", 1)
    return code, description


class ResponseDecoder:
    """Turn raw reply bodies into :class:`DecodedOutcome` records."""

    def decode(
        self,
        body: str | bytes | None,
        sent_fields: Mapping[str, Any] | None = None,
        *,
        receive_parameters: Mapping[str, Any] | None = None,
        order_id: str | None = None,
        session_id: str | None = None,
    ) -> DecodedOutcome:
        fields = parse_body(body)
        state = _Accumulator()

        for label, segment in fields.items():
            if label == ERROR_LABEL:
                self._apply_error(state, segment)
            elif label == TOKEN_LABEL:
                state.token = segment
                state.classified = True
            elif label == MESSAGE_LABEL:
                self._apply_message(state, segment)

        if fields and not state.classified:
            self._recover_code(state, next(iter(fields)))

        return DecodedOutcome(
            token=state.token,
            status_code=state.status_code,
            error_messages=state.error_messages,
            request_parameters=dict(sent_fields or {}),
            receive_parameters=dict(receive_parameters or {}),
            order_id=order_id,
            session_id=session_id,
        )

    @staticmethod
    def _apply_error(state: _Accumulator, code: str) -> None:
        description = error_codes.describe(code)
        if description is not None:
            state.error_messages[code] = description
        state.status_code = code
        state.classified = True

    @staticmethod
    def _apply_message(state: _Accumulator, message: str) -> None:
        pair = split_message(message)
        if pair is not None:
            code, description = pair
            state.error_messages[code] = description
        state.add_raw_message(message)
        state.classified = True

    @staticmethod
    def _recover_code(state: _Accumulator, first_label: str) -> None:
        code = error_codes.approximate_match(first_label)
        if code is None:
            return
        state.status_code = code
        state.error_messages[code] = error_codes.describe(code) or ""


__all__ = [
    "DecodedOutcome",
    "ERROR_LABEL",
    "MESSAGE_LABEL",
    "ResponseDecoder",
    "SUCCESS_CODE",
    "TOKEN_LABEL",
    "parse_body",
    "split_message",
]
