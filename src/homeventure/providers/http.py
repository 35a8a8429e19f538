from __future__ import annotations

from typing import Any, Optional

import requests

from homeventure.errors import ProviderError, ProviderErrorKind


def new_session(user_agent: str) -> requests.Session:
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
    )
    return session


def request_json(
    session: requests.Session,
    method: str,
    url: str,
    *,
    provider: str,
    timeout: float,
    params: Optional[dict] = None,
    json_body: Optional[dict] = None,
    headers: Optional[dict] = None,
) -> Any:
    """Single attempt, no retries. Any failure becomes a `ProviderError`."""

    try:
        resp = session.request(
            method,
            url,
            params=params,
            json=json_body,
            headers=headers,
            timeout=timeout,
        )
    except Exception as e:
        raise ProviderError(provider, ProviderErrorKind.NETWORK, str(e)) from e
    if not 200 <= resp.status_code < 300:
        raise ProviderError(provider, ProviderErrorKind.HTTP_STATUS, str(resp.status_code))
    try:
        return resp.json()
    except ValueError as e:
        raise ProviderError(provider, ProviderErrorKind.INVALID_JSON, str(e)) from e
