"""
Unit tests for catalog_api.client.session
"""
from catalog_api.application.dto.user_dto import UserResponse
from catalog_api.client.session import ClientSession, SessionEvent


USER = UserResponse(id="usr-1", name="Ada", email="ada@example.com")


class TestClientSession:
    def test_starts_anonymous(self):
        session = ClientSession()
        assert session.token is None
        assert session.user is None
        assert session.is_authenticated is False

    def test_start_notifies_login(self):
        session = ClientSession()
        events = []
        session.subscribe(lambda event, s: events.append((event, s.token)))

        session.start("tok", USER)

        assert events == [(SessionEvent.LOGIN, "tok")]
        assert session.user == USER
        assert session.is_authenticated

    def test_end_and_expire(self):
        session = ClientSession()
        events = []
        session.subscribe(lambda event, s: events.append(event))

        session.start("tok", USER)
        session.end()
        session.start("tok2", USER)
        session.expire()

        assert events == [
            SessionEvent.LOGIN,
            SessionEvent.LOGOUT,
            SessionEvent.LOGIN,
            SessionEvent.EXPIRED,
        ]
        assert session.token is None
        assert session.user is None

    def test_clearing_anonymous_session_is_silent(self):
        session = ClientSession()
        events = []
        session.subscribe(lambda event, s: events.append(event))
        session.end()
        session.expire()
        assert events == []

    def test_unsubscribe(self):
        session = ClientSession()
        events = []
        unsubscribe = session.subscribe(lambda event, s: events.append(event))
        unsubscribe()
        session.start("tok", USER)
        assert events == []

    def test_failing_listener_does_not_block_others(self):
        session = ClientSession()
        events = []

        def broken(event, s):
            raise RuntimeError("listener bug")

        session.subscribe(broken)
        session.subscribe(lambda event, s: events.append(event))
        session.start("tok", USER)

        assert events == [SessionEvent.LOGIN]
