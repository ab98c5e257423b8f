"""Resolve ${NAME} placeholders to configuration values.

Only API_KEY is recognized. Which configuration key backs it depends on
the selected API:

  ojp1.0 -> API_KEY_OJP1
  ojp2.0 -> API_KEY_OJP2

Supporting a new API means adding one entry to _API_KEY_ROUTES.
"""

from __future__ import annotations

from collections.abc import Mapping

from .errors import ResolutionError

API_KEY = "API_KEY"

# API identifier -> config key holding that API's key
_API_KEY_ROUTES: dict[str, str] = {
    "ojp1.0": "API_KEY_OJP1",
    "ojp2.0": "API_KEY_OJP2",
}


def route_api_key(api: str) -> str:
    """Return the config key that backs API_KEY for this API."""
    key = _API_KEY_ROUTES.get(api)
    if key is None:
        raise ResolutionError(
            ResolutionError.NO_MAPPING,
            api,
            API_KEY,
            f"Missing env var for {api}: no map/resolver for {API_KEY}",
        )
    return key


def resolve_var(name: str, api: str, config: Mapping[str, str | None]) -> str:
    """Resolve a placeholder name for the given API.

    Raises ResolutionError for unmapped APIs, missing or null values,
    and any name other than API_KEY.
    """
    if name != API_KEY:
        raise ResolutionError(
            ResolutionError.UNRECOGNIZED,
            api,
            name,
            f"Missing env var for {api}: cant resolve placeholder {name}",
        )

    key = route_api_key(api)
    value = config.get(key)
    if value is None:
        raise ResolutionError(
            ResolutionError.MISSING_VALUE,
            api,
            key,
            f"Missing env var for {api}: cant find {key} in .env file",
        )
    return value
