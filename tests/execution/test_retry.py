"""Tests for attempt strategies and AttemptLoop."""

import pytest

from record_spine.execution.retry import (
    AttemptLoop,
    ConstantBackoff,
    LinearBackoff,
    NoRetry,
    RetryStrategy,
)


class TestConstantBackoff:
    def test_default_configuration(self):
        strategy = ConstantBackoff()
        assert strategy.max_retries == 3
        assert strategy.delay == 30.0
        assert strategy.max_attempts == 3

    def test_delay_is_constant(self):
        strategy = ConstantBackoff(delay=2.5)
        assert [strategy.next_delay(i) for i in range(4)] == [2.5] * 4

    def test_should_retry_within_limit(self):
        strategy = ConstantBackoff(max_retries=3)
        assert strategy.should_retry(0) is True
        assert strategy.should_retry(2) is True
        assert strategy.should_retry(3) is False

    @pytest.mark.parametrize("kwargs", [{"max_retries": -1}, {"delay": -1.0}])
    def test_rejects_negative(self, kwargs):
        with pytest.raises(ValueError):
            ConstantBackoff(**kwargs)


class TestLinearBackoff:
    def test_delay_calculation(self):
        strategy = LinearBackoff(base_delay=1.0, increment=2.0, max_delay=30.0)
        assert strategy.next_delay(0) == 1.0
        assert strategy.next_delay(1) == 3.0
        assert strategy.next_delay(2) == 5.0

    def test_delay_capped(self):
        strategy = LinearBackoff(base_delay=10.0, increment=10.0, max_delay=25.0)
        assert strategy.next_delay(5) == 25.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_retries": -1},
            {"base_delay": -1.0},
            {"increment": -0.5},
            {"max_delay": -1.0},
        ],
    )
    def test_rejects_negative(self, kwargs):
        with pytest.raises(ValueError):
            LinearBackoff(**kwargs)


class TestNoRetry:
    def test_single_attempt(self):
        strategy = NoRetry()
        assert strategy.max_attempts == 1
        assert strategy.should_retry(0) is True
        assert strategy.should_retry(1) is False
        assert strategy.next_delay(0) == 0.0


class TestAttemptLoop:
    def test_runs_attempts_in_order(self, timeline):
        loop = AttemptLoop(ConstantBackoff(max_retries=3, delay=30.0), sleep=timeline.sleep)

        made = loop.run(lambda attempt, total: timeline.emit(f"{attempt}/{total}"))

        assert made == 3
        assert loop.attempts == 3
        assert timeline.events == [
            ("emit", "1/3"),
            ("sleep", 30.0),
            ("emit", "2/3"),
            ("sleep", 30.0),
            ("emit", "3/3"),
            ("sleep", 30.0),
        ]
        assert loop.total_delay == 90.0

    def test_linear_delays_follow_attempt_index(self, timeline):
        loop = AttemptLoop(LinearBackoff(max_retries=3, base_delay=1.0, increment=1.0), sleep=timeline.sleep)
        loop.run(lambda attempt, total: None)
        assert timeline.sleeps == [1.0, 2.0, 3.0]

    def test_zero_attempts(self, timeline):
        loop = AttemptLoop(ConstantBackoff(max_retries=0), sleep=timeline.sleep)
        assert loop.run(lambda attempt, total: timeline.emit("never")) == 0
        assert timeline.events == []

    def test_action_error_stops_loop(self, timeline):
        def action(attempt, total):
            timeline.emit(str(attempt))
            if attempt == 2:
                raise RuntimeError("downstream")

        loop = AttemptLoop(ConstantBackoff(max_retries=3, delay=1.0), sleep=timeline.sleep)

        with pytest.raises(RuntimeError, match="downstream"):
            loop.run(action)

        assert loop.attempts == 2
        assert isinstance(loop.last_error, RuntimeError)
        assert timeline.events == [("emit", "1"), ("sleep", 1.0), ("emit", "2")]
        assert loop.total_delay == 1.0

    def test_sleep_error_stops_loop(self):
        def sleep(seconds):
            raise InterruptedError("woken")

        loop = AttemptLoop(ConstantBackoff(max_retries=3, delay=1.0), sleep=sleep)

        with pytest.raises(InterruptedError):
            loop.run(lambda attempt, total: None)

        assert loop.attempts == 1
        assert loop.total_delay == 0.0

    def test_loop_reused_across_runs(self):
        calls = []
        loop = AttemptLoop(ConstantBackoff(max_retries=2, delay=0.0), sleep=lambda s: None)

        assert loop.run(lambda attempt, total: calls.append(attempt)) == 2
        assert loop.run(lambda attempt, total: calls.append(attempt)) == 2

        assert calls == [1, 2, 1, 2]
        assert loop.attempts == 2

    def test_rerun_after_failure_starts_clean(self, timeline):
        failures = [RuntimeError("first run")]

        def action(attempt, total):
            timeline.emit(str(attempt))
            if failures:
                raise failures.pop()

        loop = AttemptLoop(ConstantBackoff(max_retries=2, delay=1.0), sleep=timeline.sleep)
        with pytest.raises(RuntimeError):
            loop.run(action)

        assert loop.run(action) == 2
        assert loop.last_error is None
        assert loop.total_delay == 2.0
        assert timeline.lines == ["1", "1", "2"]

    def test_custom_strategy(self, timeline):
        class Twice(RetryStrategy):
            max_retries = 2

            def next_delay(self, attempt):
                return 0.0

            def should_retry(self, attempt, error=None):
                return attempt < self.max_retries

        loop = AttemptLoop(Twice(), sleep=timeline.sleep)
        assert loop.run(lambda attempt, total: None) == 2
