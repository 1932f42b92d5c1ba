"""
Tests for connection open/close handling.
"""

from conftest import RecordingChannel, send

from stranger_chat.lifecycle import broadcast_user_count, on_close, on_error, on_open


class TestOnOpen:
    def test_identity_then_stats(self, state):
        channel = RecordingChannel()

        conn = on_open(state, "a", channel)

        assert channel.sent == [
            {"status": "identity", "nickname": conn.nickname},
            {"status": "stats", "count": 1},
        ]

    def test_everyone_gets_new_count(self, state, connect):
        a = connect("a")
        b = connect("b")

        assert a.of_status("stats")[-1] == {"status": "stats", "count": 2}
        assert b.of_status("stats")[-1] == {"status": "stats", "count": 2}

    def test_count_tracks_opens(self, state, connect):
        for i in range(5):
            connect(f"c{i}")
        assert state.registry.count() == 5


class TestOnClose:
    def test_remaining_connections_get_new_count(self, state, connect):
        a, b, c = connect("a"), connect("b"), connect("c")
        a.clear()
        b.clear()
        c.clear()

        on_close(state, "c")

        assert state.registry.get("c") is None
        assert a.sent == [{"status": "stats", "count": 2}]
        assert b.sent == [{"status": "stats", "count": 2}]
        assert c.sent == []

    def test_close_notifies_partner_before_stats(self, state, connect):
        a, b = connect("a"), connect("b")
        send(state, "a", action="find_partner")
        send(state, "b", action="find_partner")
        b.clear()

        on_close(state, "a")

        assert b.statuses() == ["disconnected", "stats"]
        assert state.matchmaker.pairs() == {}

    def test_close_releases_waiting_slot(self, state, connect):
        connect("a")
        send(state, "a", action="find_partner")

        on_close(state, "a")

        assert state.matchmaker.waiting is None

    def test_closed_waiting_connection_is_not_matched(self, state, connect):
        connect("a")
        b = connect("b")
        send(state, "a", action="find_partner")
        on_close(state, "a")
        b.clear()

        send(state, "b", action="find_partner")

        assert b.statuses() == ["waiting"]
        assert state.matchmaker.waiting == "b"

    def test_double_close_is_noop(self, state, connect):
        a = connect("a")
        connect("b")
        on_close(state, "b")
        a.clear()

        on_close(state, "b")

        assert a.sent == []
        assert state.registry.count() == 1

    def test_count_equals_opens_minus_closes(self, state, connect):
        for i in range(6):
            connect(f"c{i}")
        for i in range(0, 6, 2):
            on_close(state, f"c{i}")
        assert state.registry.count() == 3


class TestOnError:
    def test_error_closes_channel_and_cleans_up(self, state, connect):
        a, b = connect("a"), connect("b")
        send(state, "a", action="find_partner")
        send(state, "b", action="find_partner")
        b.clear()

        on_error(state, "a", RuntimeError("socket reset"))

        assert a.closed is True
        assert state.registry.get("a") is None
        assert b.statuses() == ["disconnected", "stats"]

    def test_error_on_unknown_connection(self, state, connect):
        a = connect("a")
        a.clear()

        on_error(state, "ghost", RuntimeError("boom"))

        assert a.sent == []
        assert state.registry.count() == 1


class TestBroadcastUserCount:
    def test_empty_registry(self, state):
        broadcast_user_count(state)
        assert state.registry.count() == 0
