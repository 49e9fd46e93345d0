# country_info/errors.py
from __future__ import annotations

from typing import Optional


class CountryInfoError(Exception):
    """Base for every failure surfaced to clients through the response envelope."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# -----------------------------------------------------------------------------
# upstream failures (raised by providers only)
# -----------------------------------------------------------------------------

class UpstreamError(CountryInfoError):
    def __init__(self, upstream: str, message: str) -> None:
        super().__init__(message)
        self.upstream = upstream


class UpstreamUnreachable(UpstreamError):
    """Request never produced a usable response: timeout, refused connection, DNS, redirect loop."""

    def __init__(self, upstream: str, detail: str = "") -> None:
        msg = f"{upstream} could not be reached"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(upstream, msg)


class UpstreamBadStatus(UpstreamError):
    def __init__(self, upstream: str, status_code: int, detail: str = "") -> None:
        msg = f"{upstream} returned status code {status_code}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(upstream, msg)
        self.status_code = status_code


class UpstreamMalformed(UpstreamError):
    def __init__(self, upstream: str, detail: str) -> None:
        super().__init__(upstream, f"{upstream} returned an unexpected response: {detail}")


class UpstreamLogicalError(UpstreamError):
    """The upstream answered 2xx but flagged `error: true` in its own envelope."""

    def __init__(self, upstream: str, detail: str = "") -> None:
        msg = f"{upstream} reported an error"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(upstream, msg)


# -----------------------------------------------------------------------------
# aggregation failures
# -----------------------------------------------------------------------------

class CodeResolutionFailed(CountryInfoError):
    def __init__(self, code: str, cause: Optional[UpstreamError] = None) -> None:
        msg = f"Error fetching ISO3 code from ISO2: {code}"
        if cause is not None:
            msg = f"{msg} ({cause.message})"
        super().__init__(msg)
        self.code = code
        self.cause = cause


class InvalidRangeFormat(CountryInfoError):
    def __init__(self, value: str, reason: str) -> None:
        super().__init__(
            f"Invalid year range '{value}': {reason}. Expected 'startYear-endYear'."
        )
        self.value = value


class CitiesUnavailable(CountryInfoError):
    def __init__(self, code: str, cause: UpstreamError) -> None:
        super().__init__(f"Error fetching cities for {code}: {cause.message}")
        self.code = code
        self.cause = cause
