"""Decoding of Nuclino response wrappers.

Every response from the API is wrapped in an envelope of the form
``{"status": ..., "message": ..., "data": ...}``. Endpoints that return many
objects put a ``{"results": [...]}`` list inside ``data``. This module unwraps
both, and is the single place where response bodies become either typed
models or typed errors.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, List, Optional, TypeVar, Union
from uuid import UUID

from .errors import JsonError, NoDataReturnedError, make_error

logger = logging.getLogger(__name__)

T = TypeVar('T')

STATUS_SUCCESS = "success"
STATUS_FAIL = "fail"
STATUS_ERROR = "error"

_KNOWN_STATUSES = (STATUS_SUCCESS, STATUS_FAIL, STATUS_ERROR)


@dataclass(frozen=True)
class Envelope:
    """The wrapper around all responses returned by the Nuclino API.

    Attributes:
        status: One of "success", "fail" (client error) or "error" (server error)
        message: Error message, usually only set when status is not success
        data: Raw payload, present when status is success
    """
    status: str
    message: Optional[str] = None
    data: Any = None

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS

    @property
    def is_client_error(self) -> bool:
        return self.status == STATUS_FAIL

    @property
    def is_server_error(self) -> bool:
        return self.status == STATUS_ERROR

    @property
    def message_text(self) -> str:
        """The message, or an empty string if the service sent none."""
        return self.message or ""

    @classmethod
    def from_dict(cls, raw: Any) -> "Envelope":
        if not isinstance(raw, dict):
            raise JsonError(f"expected a response envelope object, got {type(raw).__name__}")
        status = raw.get("status")
        if status not in _KNOWN_STATUSES:
            raise JsonError(f"unknown response status: {status!r}")
        message = raw.get("message")
        if message is not None and not isinstance(message, str):
            raise JsonError("expected a string for 'message'")
        return cls(status=status, message=message, data=raw.get("data"))


@dataclass(frozen=True)
class ResultList(Generic[T]):
    """A list response, in the order the server returned it.

    Paginated endpoints return this wrapper so the caller can continue from
    the last result with the `after` parameter.
    """
    results: List[T] = field(default_factory=list)

    def __iter__(self) -> Iterator[T]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def as_list(self) -> List[T]:
        return list(self.results)

    def next_cursor(self) -> Optional[UUID]:
        """ID of the last result, to pass as `after` for the next page.

        Returns None when the list is empty.
        """
        if not self.results:
            return None
        return getattr(self.results[-1], "id", None)


def list_of(parse_item: Callable[[Any], T]) -> Callable[[Any], ResultList[T]]:
    """Build a parser for a ``{"results": [...]}`` payload."""

    def parse(data: Any) -> ResultList[T]:
        if not isinstance(data, dict):
            raise TypeError(f"expected a list object, got {type(data).__name__}")
        results = data["results"]
        if not isinstance(results, list):
            raise TypeError("expected a list for 'results'")
        return ResultList(results=[parse_item(item) for item in results])

    return parse


def decode_response(
    body: Union[bytes, str],
    status_code: int,
    parse: Callable[[Any], T],
) -> T:
    """Unwrap a response envelope into a typed payload.

    Args:
        body: Raw response body
        status_code: HTTP status of the response, used to classify failures
        parse: Function turning the raw `data` payload into the expected type

    Returns:
        The parsed payload

    Raises:
        JsonError: If the body is not a valid envelope or the payload has the wrong shape
        NoDataReturnedError: If the envelope reports success but carries no data
        ClientError: If the envelope reports failure and status_code < 500
        ServerError: If the envelope reports failure and status_code >= 500
    """
    try:
        raw = json.loads(body)
    except ValueError as e:
        raise JsonError(str(e)) from e

    envelope = Envelope.from_dict(raw)

    if not envelope.is_success:
        logger.warning(
            f"Nuclino reported {envelope.status} (HTTP {status_code}): {envelope.message_text}"
        )
        raise make_error(status_code, envelope.message_text)

    if envelope.data is None:
        raise NoDataReturnedError()

    try:
        return parse(envelope.data)
    except (KeyError, TypeError, ValueError) as e:
        if isinstance(e, KeyError):
            message = f"missing field {e}"
        else:
            message = str(e)
        raise JsonError(message) from e

