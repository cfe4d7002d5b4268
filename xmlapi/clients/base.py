from abc import ABC, abstractmethod

import requests


class BaseClient(ABC):
    @abstractmethod
    def make_session(self) -> requests.Session:
        """Create and configure the HTTP session used as transport."""

    @abstractmethod
    def request(self, method, endpoint, params=None, body=None, timeout=None) -> bytes:
        """Send one operation to the service and return the raw response body."""
