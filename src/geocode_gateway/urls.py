"""
Upstream request builder for the Photon API.

Forward search lives under the configured base (usually ".../api"),
while reverse lookup lives at the site root ("/reverse"), so the
two modes build their URLs differently.
"""

from urllib.parse import quote_plus

from .models import GeocodingQuery, clamp_limit


def reverse_base_url(base_url: str) -> str:
    """Strip a trailing "/api" or "/api/" so "/reverse" lands on the site root."""
    if base_url.endswith("/api"):
        return base_url[: -len("/api")]
    if base_url.endswith("/api/"):
        return base_url[: -len("/api/")]
    return base_url


def build_forward_url(base_url: str, text: str, limit: int, locale: str) -> str:
    return (
        f"{base_url}/?q={quote_plus(text, encoding='utf-8')}"
        f"&limit={clamp_limit(limit)}&lang={locale}"
    )


def build_reverse_url(base_url: str, lat: float, lon: float, limit: int, locale: str) -> str:
    return (
        f"{reverse_base_url(base_url)}/reverse?lat={lat}&lon={lon}"
        f"&limit={clamp_limit(limit)}&lang={locale}"
    )


def build_url(query: GeocodingQuery, base_url: str) -> str:
    """
    Build the exact provider URL for a validated query.

    Args:
        query: Validated query
        base_url: Configured provider base URL

    Returns:
        URL string; no network call is made
    """
    if query.is_reverse:
        if query.point is None:
            raise ValueError("reverse query without a point")
        return build_reverse_url(
            base_url, query.point.lat, query.point.lon, query.limit, query.locale
        )
    if query.text is None:
        raise ValueError("forward query without text")
    return build_forward_url(base_url, query.text, query.limit, query.locale)
