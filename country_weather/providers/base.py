from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests
from requests import Response


logger = logging.getLogger(__name__)


class WeatherError(RuntimeError):
    """Base provider error."""


class NetworkError(WeatherError):
    """The request could not be completed."""


class WeatherTimeout(NetworkError):
    """The provider did not answer within the configured timeout."""


class StatusError(WeatherError):
    """The provider answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        super().__init__(message or f"HTTP {status_code}")
        self.status_code = status_code


class DecodeError(WeatherError):
    """The response body is not the JSON document we expect."""


@dataclass(frozen=True)
class RequestConfig:
    timeout: float = 10.0


class WeatherProvider:
    """Base class that applies the timeout and error mapping for HTTP providers."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.error("Provider returned %s: %s", response.status_code, response.text)
            raise StatusError(response.status_code)
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise WeatherTimeout(f"timed out after {self.request_config.timeout}s") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise NetworkError("request failed") from exc
        try:
            return self._handle_response(response)
        except WeatherError:
            response.close()
            raise


__all__ = [
    "WeatherProvider",
    "WeatherError",
    "NetworkError",
    "WeatherTimeout",
    "StatusError",
    "DecodeError",
    "RequestConfig",
]
