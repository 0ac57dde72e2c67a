"""Request descriptor builder shared by the sync and async auth clients."""

from __future__ import annotations

from urllib.parse import urlencode

from ..models import JSON_CONTENT_TYPE, AuthRequest, LoginRequest


class RequestBuilder:
    """Builds one ``AuthRequest`` per auth operation.

    The API root is bound once; anything tenant-specific (the hostname) is
    passed in per call so callers always read their current value.
    """

    def __init__(self, base_url: str) -> None:
        """Initialize request builder.

        Args:
            base_url: API root without trailing slash.
        """
        self._base_url = base_url

    @property
    def base_url(self) -> str:
        return self._base_url

    def _request(
        self,
        method: str,
        path: str,
        *,
        query: dict[str, str] | None = None,
        body: str | None = None,
    ) -> AuthRequest:
        url = f"{self._base_url}{path}"
        if query:
            url = f"{url}?{urlencode(query)}"
        return AuthRequest(
            method=method,
            url=url,
            headers={"Content-Type": JSON_CONTENT_TYPE},
            body=body,
            credentials="include",
        )

    def bootstrap(self, hostname: str) -> AuthRequest:
        """GET ``/configuration?hostname=...``."""
        return self._request("GET", "/configuration", query={"hostname": hostname})

    def login(self, username: str, project_id: str) -> AuthRequest:
        """POST ``/login`` with the compact JSON credentials body."""
        body = LoginRequest(username=username, project_id=project_id).to_json()
        return self._request("POST", "/login", body=body)

    def refresh(self) -> AuthRequest:
        """PUT ``/refresh``; the session cookie identifies the session."""
        return self._request("PUT", "/refresh")

    def logout(self) -> AuthRequest:
        """PUT ``/logout``."""
        return self._request("PUT", "/logout")
