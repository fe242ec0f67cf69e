"""
HTTP transport for the directory search form.

One POST per call, no retries and no caching.
"""

from typing import Optional

import requests
from loguru import logger

from uwo_directory.settings import REQUEST_TIMEOUT, USER_AGENT
from uwo_directory.exceptions import TransportError

logger = logger.bind(module="transport")


class TransportClient:
    """Submits the directory search form and returns the raw page."""

    def __init__(self, timeout: float = REQUEST_TIMEOUT, user_agent: str = USER_AGENT):
        self.timeout = timeout
        self.user_agent = user_agent

    def post(self, endpoint_url: str, backend_server: str, query: str) -> str:
        """
        POST the search form and return the response body.

        Args:
            endpoint_url: Directory front-end URL
            backend_server: Value for the ``server`` form field
            query: Value for the ``query`` form field

        Returns:
            Response body, decoded with the charset the server declares

        Raises:
            TransportError: On a non-2xx status or if the request itself fails
        """
        headers = {
            'User-Agent': self.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
        }
        form_data = {
            'server': backend_server,
            'query': query,
        }

        try:
            logger.debug(f"POST {endpoint_url} (server={backend_server}, query={query!r})")
            response = requests.post(
                endpoint_url,
                data=form_data,
                headers=headers,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {endpoint_url} failed: {e}")
            raise TransportError(str(e)) from e

        if not 200 <= response.status_code < 300:
            status_line = _status_line(response.status_code, response.reason)
            logger.error(f"Directory returned {status_line} for query {query!r}")
            raise TransportError(status_line, status_code=response.status_code)

        return response.text


def _status_line(status_code: int, reason: Optional[str]) -> str:
    return f"{status_code} {reason}" if reason else str(status_code)
