import logging
import threading

import requests

from xmlapi.exceptions import AuthorizationError
from xmlapi.models import AuthToken
from xmlapi.transforms import decode_auth_token, decode_json
from xmlapi.transport import AUTHORIZE_ENDPOINT, send_once

logger = logging.getLogger(__name__)


class Session:
    """Credentials and the current token for one client instance.

    The API key only ever goes to /authorize; every other request carries
    the token obtained from it. Token reads and replacements go through
    ``_lock`` so a client can be shared between threads.
    """

    def __init__(self, api_key, base_url, http=None, timeout=None):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.http = http if http is not None else requests.Session()
        self.timeout = timeout
        self._auth = AuthToken(token='')
        self._lock = threading.Lock()
        self._refresh_lock = threading.Lock()

    @property
    def token(self) -> str:
        with self._lock:
            return self._auth.token

    @property
    def expires(self):
        with self._lock:
            return self._auth.expires

    def credential_for(self, endpoint) -> str:
        if endpoint == AUTHORIZE_ENDPOINT:
            return self.api_key
        return self.token

    def clear(self):
        with self._lock:
            self._auth = AuthToken(token='')

    def authorize(self, timeout=None) -> AuthToken:
        """Exchange the API key for a fresh token and store it.

        On any failure the previously stored token is left untouched.
        """
        response = send_once(self, 'GET', AUTHORIZE_ENDPOINT, timeout=timeout)
        if not response.ok:
            raise AuthorizationError(
                f"authorization rejected with HTTP {response.status_code}",
                status_code=response.status_code,
                detail=response.text,
            )

        auth = decode_auth_token(decode_json(response.content))
        if auth is None:
            raise AuthorizationError("authorization failed", status_code=response.status_code)

        with self._lock:
            self._auth = auth
        logger.info("Authorized against %s (expires: %s)", self.base_url, auth.expires or "unknown")
        return auth

    def refresh(self, stale_token, timeout=None) -> str:
        """Replace ``stale_token`` with a new one, at most once per expiry.

        Concurrent callers that saw the same rejected token wait here; the
        first one reauthorizes and the rest reuse its result.
        """
        with self._refresh_lock:
            current = self.token
            if current and current != stale_token:
                logger.warning("Token already refreshed by a concurrent request, reusing it")
                return current
            return self.authorize(timeout=timeout).token
