import logging

import requests

from xmlapi.exceptions import TransportError
from xmlapi.models import RawResponse

logger = logging.getLogger(__name__)

AUTHORIZE_ENDPOINT = '/authorize'


def build_request(session, method, endpoint, params=None, data=None) -> requests.PreparedRequest:
    """Prepare one attempt, reading the credential from the session right now."""
    headers = {'Content-Type': 'application/json'}
    credential = session.credential_for(endpoint)
    if credential:
        headers['Authorization'] = credential

    request = requests.Request(
        method=method,
        url=f"{session.base_url}{endpoint}",
        headers=headers,
        params=params or {},
        data=data,
    )
    return session.http.prepare_request(request)


def send_once(session, method, endpoint, params=None, data=None, timeout=None) -> RawResponse:
    prepared = build_request(session, method, endpoint, params=params, data=data)
    if timeout is None:
        timeout = session.timeout
    try:
        with session.http.send(prepared, timeout=timeout) as response:
            content = response.content
            status_code = response.status_code
    except requests.exceptions.RequestException as exc:
        raise TransportError(f"{method} {endpoint} failed: {exc}") from exc

    logger.debug("%s %s -> %d (%d bytes)", method, endpoint, status_code, len(content))
    return RawResponse(
        status_code=status_code,
        content=content,
        credential=prepared.headers.get('Authorization', ''),
    )
