"""
Response classification for FameEX requests

Every HTTP exchange settles into exactly one result:
- Resolved: HTTP 200 and an application success code, carries body["data"]
- ResolvedWithErrorInfo: HTTP 200 with an application error code. The body is
  returned as-is with a "fameexErrorInfo" summary injected
- Rejected: non-200 status, transport failure, or a body that could not be
  processed. Carries the diagnostic string raised to the caller

Only non-success outcomes are logged, one line each.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

import httpx

from fameex_connector.constants import (
    ERROR_CODE_DESCRIPTIONS,
    ERROR_INFO_FIELD,
    NO_ERROR_CODE,
    NO_PARAMETERS,
    STATUS_OK,
    STATUS_ZERO,
    UNKNOWN_ERROR,
)
from fameex_connector.exceptions import FameexRequestError
from fameex_connector.utils import trim_any

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Raw outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HttpResponseOutcome:
    """A response was received (any status)"""

    status_code: int
    reason_phrase: str
    body: Any


@dataclass(frozen=True)
class HttpErrorOutcome:
    """
    The exchange raised. status_code/body are only present when the error
    carries a response (httpx.HTTPStatusError); a pure transport failure
    (timeout, DNS, connection reset) has neither.
    """

    error: BaseException
    status_code: Optional[int] = None
    reason_phrase: Optional[str] = None
    body: Any = None


RawOutcome = Union[HttpResponseOutcome, HttpErrorOutcome]


def read_body(response: httpx.Response) -> Any:
    """Parsed JSON body, or the raw text when the body is not JSON"""
    try:
        return response.json()
    except ValueError:
        return response.text or None


def outcome_from_response(response: httpx.Response) -> HttpResponseOutcome:
    return HttpResponseOutcome(
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        body=read_body(response),
    )


def outcome_from_error(error: BaseException) -> HttpErrorOutcome:
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        return HttpErrorOutcome(
            error=error,
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            body=read_body(response),
        )
    return HttpErrorOutcome(error=error)


def describe_failure(outcome: RawOutcome) -> str:
    """Stringify an outcome that has no status code to report"""
    if isinstance(outcome, HttpErrorOutcome):
        error = outcome.error
        return f"{type(error).__name__}: {error}"
    return str(outcome)


# ---------------------------------------------------------------------------
# Response body
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResponseBody:
    """
    Optional-field view over a FameEX envelope

    Success: {"code": 200 | "0", "data": ...}
    Error:   {"code": <int>, "msg": <str>}

    Non-dict bodies (HTML error pages, empty bodies) have no fields.
    """

    raw: Any

    @property
    def is_object(self) -> bool:
        return isinstance(self.raw, dict)

    def get(self, field: str) -> Any:
        if self.is_object and field in self.raw:
            return self.raw[field]
        return None

    @property
    def code(self) -> Any:
        return self.get("code")

    @property
    def msg(self) -> Any:
        return self.get("msg")

    @property
    def data(self) -> Any:
        return self.get("data")

    def has_success_code(self) -> bool:
        code = self.code
        if isinstance(code, bool):
            return False
        return code == STATUS_OK or code == STATUS_ZERO


def describe_error_code(code: Any) -> Optional[str]:
    """Look up a known error code, accepting ints and numeric strings"""
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return ERROR_CODE_DESCRIPTIONS.get(code)
    if isinstance(code, str) and code.isascii() and code.isdecimal():
        return ERROR_CODE_DESCRIPTIONS.get(int(code))
    return None


@dataclass(frozen=True)
class NormalizedError:
    code: Any
    message: Any

    @classmethod
    def from_body(cls, body: ResponseBody) -> "NormalizedError":
        code = body.code if body.code is not None else NO_ERROR_CODE

        message = describe_error_code(body.code)
        if message is None:
            message = body.msg if body.msg is not None else UNKNOWN_ERROR

        return cls(code=code, message=message)

    def summary(self) -> str:
        """e.g. "[112015] Signature error" """
        return f"[{self.code}] {trim_any(self.message, ' .')}"


# ---------------------------------------------------------------------------
# Classified results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Resolved:
    data: Any


@dataclass(frozen=True)
class ResolvedWithErrorInfo:
    body: Any
    error_info: str


@dataclass(frozen=True)
class Rejected:
    reason: str


ClassifiedResult = Union[Resolved, ResolvedWithErrorInfo, Rejected]


def _dump_body(body: Any) -> str:
    return json.dumps(body, default=str)


def classify_response(
    outcome: RawOutcome,
    request_description: str,
    url: str,
    log: Optional[Any] = None,
) -> ClassifiedResult:
    """
    Classify the outcome of one HTTP exchange

    Success requires both HTTP 200 and an application success code. HTTP 200
    with an application error code is a soft failure: the caller still gets
    the body, annotated with the error summary.

    Args:
        outcome: Response or raised error from the exchange
        request_description: Params string for log lines
        url: Full request URL for log lines
        log: Logger exposing info()/warning(), defaults to this module's logger

    Returns:
        Exactly one of Resolved, ResolvedWithErrorInfo, Rejected
    """
    log = log or logger
    status_code = outcome.status_code
    reason_phrase = outcome.reason_phrase
    body = ResponseBody(outcome.body)
    params = request_description or NO_PARAMETERS

    try:
        if status_code == STATUS_OK and body.has_success_code():
            return Resolved(body.data)

        error = NormalizedError.from_body(body)
        error_info = error.summary()

        if status_code:
            diagnostic = f"{status_code} {reason_phrase}, {error_info}"
        else:
            diagnostic = describe_failure(outcome)

        if body.is_object:
            body.raw[ERROR_INFO_FIELD] = error_info

        if status_code == STATUS_OK:
            log.info(
                f"FameEX processed a request to {url} with data {params}, "
                f"but with error: {error.message}. Resolving…"
            )
            return ResolvedWithErrorInfo(body=body.raw, error_info=error_info)

        log.warning(f"Request to {url} with data {params} failed. details: {diagnostic}. Rejecting…")
        return Rejected(diagnostic)

    except Exception as e:
        raw = _dump_body(outcome.body)
        log.warning(
            f"Error while processing response of request to {url} with data {params}: {e}. "
            f"Data object I've got: {raw}."
        )
        return Rejected(f"Unable to process data: {raw}. {e}")


def settle(result: ClassifiedResult) -> Any:
    """Return the payload of a resolved result, raise for a rejected one"""
    if isinstance(result, Resolved):
        return result.data
    if isinstance(result, ResolvedWithErrorInfo):
        return result.body
    if isinstance(result, Rejected):
        raise FameexRequestError(result.reason)
    raise TypeError(f"Unexpected classified result: {result!r}")
