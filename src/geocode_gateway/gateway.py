"""
The geocoding gateway: validate, build the provider URL, fetch, translate.

Every failure is routed through the classifier, so callers always get a
GatewayResult with a status code and a JSON-ready body.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Union

from .base import UpstreamClient
from .classifier import ErrorKind, ErrorResponse, classify
from .client import HttpUpstreamClient
from .errors import InvalidQueryError, UpstreamStatusError
from .models import CanonicalResponse, GeocodingQuery
from .settings import GatewaySettings
from .translator import PhotonTranslator
from .urls import build_url
from .validation import parse_params, parse_query

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GatewayResult:
    """Outcome of one gateway invocation: either a response or a classified error."""
    status_code: int
    response: Optional[CanonicalResponse] = None
    error: Optional[ErrorResponse] = None

    def is_success(self) -> bool:
        return self.error is None and self.response is not None

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    def to_dict(self) -> dict[str, Any]:
        """JSON body to serve for this result."""
        if self.error is not None:
            return self.error.to_dict()
        if self.response is None:
            return {}
        return self.response.to_dict()


class GeocodeGateway:
    """
    Forward and reverse geocoding against a single configured provider.

    The provider base URL is read once from the (frozen) settings at
    construction time. Instances hold no per-request state and can be
    shared between threads.
    """

    def __init__(
        self,
        config: Optional[GatewaySettings] = None,
        client: Optional[UpstreamClient] = None,
        translator: Optional[PhotonTranslator] = None,
    ):
        """
        Args:
            config: Gateway settings (defaults to environment-derived settings)
            client: Upstream client (defaults to an HttpUpstreamClient built from config)
            translator: Response translator (defaults to PhotonTranslator)
        """
        self.config = config if config is not None else GatewaySettings()
        self.service_url = self.config.service_url
        self.client = client if client is not None else HttpUpstreamClient(
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
        )
        self.translator = translator if translator is not None else PhotonTranslator()

        logger.info(
            f"Initialized GeocodeGateway: {self.service_url}, "
            f"client={type(self.client).__name__}"
        )

    @classmethod
    def from_settings(cls, settings: GatewaySettings, **kwargs: Any) -> "GeocodeGateway":
        return cls(config=settings, **kwargs)

    def geocode(
        self,
        q: Optional[str] = None,
        reverse: Union[bool, str, None] = False,
        point: Optional[str] = None,
        limit: Union[int, str, None] = None,
        locale: Optional[str] = None,
    ) -> GatewayResult:
        """
        Handle one geocoding request from raw parameters.

        Returns:
            GatewayResult with either a CanonicalResponse (status 200)
            or a classified ErrorResponse
        """
        try:
            query = parse_query(q=q, reverse=reverse, point=point, limit=limit, locale=locale)
            return self._ok(self.lookup(query))
        except Exception as e:
            return self._failed(e)

    def handle(self, params: Mapping[str, Any]) -> GatewayResult:
        """Handle one request given a mapping of parsed query-string parameters."""
        try:
            query = parse_params(params)
            return self._ok(self.lookup(query))
        except Exception as e:
            return self._failed(e)

    def geocode_batch(self, requests: Iterable[Mapping[str, Any]]) -> List[GatewayResult]:
        """
        Handle multiple requests sequentially.

        Each request is independent; one failure does not affect the others.

        Returns:
            List of GatewayResult objects (same order as input)
        """
        return [self.handle(params) for params in requests]

    def lookup(self, query: GeocodingQuery) -> CanonicalResponse:
        """
        Run a validated query against the provider.

        Raises:
            UpstreamUnavailableError, UpstreamStatusError, ResponseParseError
        """
        url = build_url(query, self.service_url)
        logger.debug(f"{query.mode.title()} geocoding request: {url}")

        response = self.client.fetch(url)
        if not response.ok:
            logger.warning(
                f"Geocoding service returned error: {response.status_code} for URL: {url}"
            )
            raise UpstreamStatusError(response.status_code, url, body_snippet=response.body[:200])

        return self.translator.translate(response.body, limit=query.limit, locale=query.locale)

    @staticmethod
    def _ok(response: CanonicalResponse) -> GatewayResult:
        return GatewayResult(status_code=200, response=response)

    @staticmethod
    def _failed(error: Exception) -> GatewayResult:
        classified = classify(error)
        if isinstance(error, InvalidQueryError):
            logger.warning(f"Invalid geocoding request: {error.reason}")
        elif classified.kind is ErrorKind.INTERNAL:
            logger.exception("Geocoding error")
        else:
            logger.warning(f"Geocoding failed ({classified.kind}): {error}")
        return GatewayResult(status_code=classified.status_code, error=classified)
