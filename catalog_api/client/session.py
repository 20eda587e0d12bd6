"""
Client-side session state.

A ClientSession is passed explicitly to whatever needs it (usually a
CatalogApiClient) and notifies subscribers when the caller logs in, logs out
or has their token rejected by the server.
"""

# Standard library imports
import logging
from enum import Enum
from typing import Callable, List, Optional

# Local application imports
from ..application.dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class SessionEvent(str, Enum):
    LOGIN = "login"
    LOGOUT = "logout"
    EXPIRED = "expired"


SessionListener = Callable[[SessionEvent, "ClientSession"], None]


class ClientSession:
    """Holds the bearer token and signed-in user for one API consumer"""

    def __init__(self) -> None:
        self._token: Optional[str] = None
        self._user: Optional[UserResponse] = None
        self._listeners: List[SessionListener] = []

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def user(self) -> Optional[UserResponse]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a listener for session events

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def start(self, token: str, user: UserResponse) -> None:
        """Store credentials from a successful login or registration"""
        self._token = token
        self._user = user
        self._emit(SessionEvent.LOGIN)

    def update_user(self, user: UserResponse) -> None:
        self._user = user

    def end(self) -> None:
        """Explicit logout"""
        self._clear(SessionEvent.LOGOUT)

    def expire(self) -> None:
        """The server rejected the token; drop it"""
        self._clear(SessionEvent.EXPIRED)

    def _clear(self, event: SessionEvent) -> None:
        if not self.is_authenticated:
            return
        self._token = None
        self._user = None
        self._emit(event)

    def _emit(self, event: SessionEvent) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception as e:
                # One faulty listener must not stop the others from being notified
                logger.error(f"Session listener failed on {event.value}: {e}", exc_info=True)
