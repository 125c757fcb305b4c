"""
Module: test_retry.py
Description: Unit tests for the whole-list retry policy.
"""

import pytest

from sqs_producer.producer.retry import EntriesRejected, whole_list_retrying


async def _run(retrying, outcomes):
    """Drive the controller through a scripted list of attempt outcomes."""
    calls = []
    async for attempt in retrying:
        with attempt:
            outcome = outcomes[len(calls)]
            calls.append(outcome)
            if isinstance(outcome, Exception):
                raise outcome
    return calls


class TestWholeListRetrying:
    """Test cases for whole_list_retrying."""

    @pytest.mark.asyncio
    async def test_stops_after_retries_plus_one(self, recording_sleep):
        retrying = whole_list_retrying(2, 3, sleep=recording_sleep)
        outcomes = [EntriesRejected(["a"]) for _ in range(5)]

        with pytest.raises(EntriesRejected):
            await _run(retrying, outcomes)

        assert recording_sleep.delays == [3, 3]

    @pytest.mark.asyncio
    async def test_success_ends_loop(self, recording_sleep):
        retrying = whole_list_retrying(4, 1, sleep=recording_sleep)

        calls = await _run(retrying, [EntriesRejected(["a"]), "ok", "unused"])

        assert len(calls) == 2
        assert calls[1] == "ok"
        assert recording_sleep.delays == [1]

    @pytest.mark.asyncio
    async def test_other_errors_not_retried(self, recording_sleep):
        retrying = whole_list_retrying(4, 1, sleep=recording_sleep)
        error = ConnectionError("down")

        with pytest.raises(ConnectionError) as exc_info:
            await _run(retrying, [error, "unused"])

        assert exc_info.value is error
        assert recording_sleep.delays == []

    @pytest.mark.asyncio
    async def test_before_sleep_hook(self, recording_sleep):
        seen = []
        retrying = whole_list_retrying(
            1, 0, sleep=recording_sleep,
            before_sleep=lambda state: seen.append(state.attempt_number)
        )

        await _run(retrying, [EntriesRejected(["a"]), "ok"])

        assert seen == [1]

    def test_negative_retries(self):
        with pytest.raises(ValueError, match="non-negative"):
            whole_list_retrying(-1, 1)

    def test_entries_rejected_message(self):
        error = EntriesRejected(["a", "b"])

        assert error.failed_ids == ["a", "b"]
        assert str(error) == "2 entries rejected"
