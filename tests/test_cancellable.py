"""
Tests for the Cancellable token and run_cancellable.
"""

import asyncio

import pytest

from quicksearch.search.cancellable import Cancellable, Cancelled, run_cancellable


class TestCancellable:
    """Test observer bookkeeping on the token."""

    def test_starts_uncancelled(self):
        assert Cancellable().is_cancelled() is False

    def test_cancel_notifies_observers_once(self):
        token = Cancellable()
        calls = []
        token.connect(lambda: calls.append("a"))
        token.connect(lambda: calls.append("b"))
        token.cancel()
        token.cancel()
        assert calls == ["a", "b"]
        assert token.is_cancelled() is True

    def test_disconnected_observer_not_called(self):
        token = Cancellable()
        calls = []
        handler_id = token.connect(lambda: calls.append("x"))
        token.disconnect(handler_id)
        token.cancel()
        assert calls == []

    def test_connect_after_cancel_fires_immediately(self):
        token = Cancellable()
        token.cancel()
        calls = []
        assert token.connect(lambda: calls.append("late")) == 0
        assert calls == ["late"]

    def test_disconnect_unknown_id_is_noop(self):
        Cancellable().disconnect(42)

    def test_raise_if_cancelled(self):
        token = Cancellable()
        token.raise_if_cancelled()
        token.cancel()
        with pytest.raises(Cancelled, match="stop"):
            token.raise_if_cancelled("stop")


class TestRunCancellable:
    """Test the cancellation race around producing a result."""

    @pytest.mark.asyncio
    async def test_returns_result(self):
        token = Cancellable()
        assert await run_cancellable(token, lambda: [1, 2]) == [1, 2]

    @pytest.mark.asyncio
    async def test_already_cancelled_skips_producer(self):
        token = Cancellable()
        token.cancel()
        calls = []
        with pytest.raises(Cancelled):
            await run_cancellable(token, lambda: calls.append("ran"))
        assert calls == []

    @pytest.mark.asyncio
    async def test_cancel_while_pending_discards_result(self):
        token = Cancellable()
        asyncio.get_running_loop().call_soon(token.cancel)
        with pytest.raises(Cancelled, match="Search cancelled"):
            await run_cancellable(token, lambda: ["google"], "Search cancelled")

    @pytest.mark.asyncio
    async def test_observer_disconnected_after_success(self):
        token = Cancellable()
        await run_cancellable(token, lambda: "done")
        assert token._observers == {}

    @pytest.mark.asyncio
    async def test_producer_error_propagates(self):
        token = Cancellable()

        def boom():
            raise KeyError("missing")

        with pytest.raises(KeyError):
            await run_cancellable(token, boom)
        assert token._observers == {}
