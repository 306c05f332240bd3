"""Tests for the notification channel."""

import asyncio

from pointsdesk.services import NotificationChannel, NotificationKind


class TestNotify:
    """Publishing messages."""

    def test_last_write_wins(self) -> None:
        channel = NotificationChannel(timeout=0)
        channel.info("first")
        second = channel.error("second")
        assert channel.current is second
        assert channel.current.kind is NotificationKind.ERROR

    def test_sequence_ids_are_monotonic_for_repeated_text(self) -> None:
        channel = NotificationChannel(timeout=0)
        a = channel.success("Saved.")
        b = channel.success("Saved.")
        assert b.sequence_id > a.sequence_id
        assert a != b

    def test_empty_text_ignored(self) -> None:
        channel = NotificationChannel(timeout=0)
        channel.info("kept")
        assert channel.notify("") is None
        assert channel.current.text == "kept"

    def test_dismiss(self) -> None:
        channel = NotificationChannel(timeout=0)
        channel.info("bye")
        channel.dismiss()
        assert channel.current is None

    def test_listeners_see_changes(self) -> None:
        channel = NotificationChannel(timeout=0)
        seen = []
        unsubscribe = channel.subscribe(seen.append)
        message = channel.info("hello")
        channel.dismiss()
        unsubscribe()
        channel.info("unseen")
        assert seen == [message, None]

    def test_to_dict(self) -> None:
        message = NotificationChannel(timeout=0).success("ok")
        assert message.to_dict() == {"text": "ok", "kind": "success", "sequenceId": message.sequence_id}

    def test_no_event_loop_keeps_message(self) -> None:
        channel = NotificationChannel(timeout=0.01)
        channel.info("sticky")
        assert channel.current.text == "sticky"


class TestAutoDismiss:
    """Expiry is tied to the message it was scheduled for."""

    def test_message_expires(self) -> None:
        async def scenario():
            channel = NotificationChannel(timeout=0.02)
            channel.info("short lived")
            await asyncio.sleep(0.06)
            return channel.current

        assert asyncio.run(scenario()) is None

    def test_newer_message_survives_older_timer(self) -> None:
        async def scenario():
            channel = NotificationChannel(timeout=0.1)
            channel.info("old")
            await asyncio.sleep(0.06)
            newer = channel.error("new")
            await asyncio.sleep(0.06)  # old timer would have fired by now
            still = channel.current
            await asyncio.sleep(0.15)
            return newer, still, channel.current

        newer, still, final = asyncio.run(scenario())
        assert still is newer
        assert final is None

    def test_stale_expiry_is_ignored(self) -> None:
        channel = NotificationChannel(timeout=0)
        old = channel.info("old")
        newer = channel.info("new")
        channel._expire(old.sequence_id)
        assert channel.current is newer
