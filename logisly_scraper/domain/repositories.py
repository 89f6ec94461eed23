"""
Repository Interfaces - Domain layer defines interfaces, infrastructure implements them
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator

from .entities import RawRow
from .value_objects import Credentials


class BrowserSession(ABC):
    """One live automated browsing context, owned by a single scrape run"""

    @abstractmethod
    def navigate(self, url: str, timeout_ms: int) -> None:
        """Load url and wait for network idle, raising NavigationTimeout"""
        pass

    @property
    @abstractmethod
    def current_url(self) -> str:
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the session; calling it again is a no-op"""
        pass


class SessionProvider(ABC):
    """Hands out fresh browser sessions"""

    @abstractmethod
    def acquire(self) -> BrowserSession:
        """Start a new session, raising SessionAcquisitionFailed"""
        pass

    @contextmanager
    def session(self) -> Iterator[BrowserSession]:
        """Acquire a session and release it however the block exits"""
        handle = self.acquire()
        try:
            yield handle
        finally:
            handle.close()


class Authenticator(ABC):
    """Drives a session to a logged-in state"""

    @abstractmethod
    def login(self, session: BrowserSession, login_url: str, credentials: Credentials) -> None:
        pass


class OrderTableExtractor(ABC):
    """Reads raw order rows off a listing page"""

    @abstractmethod
    def extract_rows(self, session: BrowserSession) -> Iterator[RawRow]:
        pass
