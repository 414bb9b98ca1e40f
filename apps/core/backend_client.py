# apps/core/backend_client.py
import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Raised when a backend call fails or answers with a non-2xx status"""

    def __init__(self, message, status_code=None, url=None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class BackendClient:
    """
    Thin wrapper around the academy REST backend.

    Args:
        base_url: Prefix for every API path. Falls back to settings.BACKEND_URL.
        session: Optional requests.Session to send requests through.
    """

    def __init__(self, base_url=None, session=None):
        if base_url is None:
            base_url = settings.BACKEND_URL
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()

    @classmethod
    def for_request(cls, request, session=None):
        """Build a client; an empty BACKEND_URL resolves to the request's own origin"""
        base_url = settings.BACKEND_URL
        if not base_url:
            base_url = f"{request.scheme}://{request.get_host()}"
        return cls(base_url=base_url, session=session)

    def url_for(self, path):
        return f"{self.base_url}{path}"

    def get(self, path):
        """GET a path and return the decoded JSON body"""
        response = self._send('GET', path)
        try:
            return response.json()
        except ValueError as e:
            url = self.url_for(path)
            raise BackendError(
                f"GET {url} returned invalid JSON",
                status_code=response.status_code,
                url=url,
            ) from e

    def post(self, path, body):
        """POST a JSON body; returns the decoded response or None when it has no JSON"""
        response = self._send(
            'POST', path,
            json=body,
            headers={'Content-Type': 'application/json'},
        )
        try:
            return response.json()
        except ValueError:
            return None

    def _send(self, method, path, **kwargs):
        url = self.url_for(path)
        logger.debug("%s %s", method, url)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            raise BackendError(f"{method} {url} failed: {e}", url=url) from e

        if not 200 <= response.status_code < 300:
            raise BackendError(
                f"{method} {url} returned {response.status_code}",
                status_code=response.status_code,
                url=url,
            )
        return response
