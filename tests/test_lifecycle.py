"""Tests for the per-flow request lifecycle."""

from job_post_studio.models.lifecycle import RequestStatus
from job_post_studio.pipeline.lifecycle import RequestLifecycle


class TestRequestLifecycle:
    def test_initial_state(self):
        lc = RequestLifecycle("creation")
        assert lc.status is RequestStatus.IDLE
        assert lc.result is None
        assert lc.error is None

    def test_success(self):
        lc = RequestLifecycle("creation")
        rid = lc.begin()
        assert lc.status is RequestStatus.LOADING
        assert lc.succeed(rid, {"ok": True})
        assert lc.status is RequestStatus.SUCCEEDED
        assert lc.result == {"ok": True}

    def test_failure_keeps_previous_result(self):
        lc = RequestLifecycle("creation")
        lc.succeed(lc.begin(), "first")
        assert lc.fail(lc.begin(), "Network down")
        assert lc.status is RequestStatus.FAILED
        assert lc.error == "Network down"
        assert lc.result == "first"

    def test_begin_clears_error(self):
        lc = RequestLifecycle("refinement")
        lc.fail(lc.begin(), "boom")
        lc.begin()
        assert lc.error is None
        assert lc.status is RequestStatus.LOADING

    def test_request_ids_increase(self):
        lc = RequestLifecycle("images")
        assert lc.begin() < lc.begin() < lc.begin()

    def test_stale_success_dropped(self):
        lc = RequestLifecycle("creation")
        old = lc.begin()
        new = lc.begin()
        assert lc.succeed(new, "new")
        assert not lc.succeed(old, "old")
        assert lc.result == "new"

    def test_stale_response_dropped_while_newer_in_flight(self):
        lc = RequestLifecycle("creation")
        old = lc.begin()
        lc.begin()
        assert not lc.fail(old, "late error")
        assert lc.status is RequestStatus.LOADING
        assert lc.error is None

    def test_settled_request_cannot_settle_twice(self):
        lc = RequestLifecycle("creation")
        rid = lc.begin()
        lc.succeed(rid, "a")
        assert not lc.fail(rid, "b")
        assert lc.status is RequestStatus.SUCCEEDED

    def test_reset(self):
        lc = RequestLifecycle("creation")
        lc.fail(lc.begin(), "err")
        lc.reset()
        assert lc.status is RequestStatus.IDLE
        assert lc.result is None
        assert lc.error is None

    def test_response_after_reset_dropped(self):
        lc = RequestLifecycle("creation")
        rid = lc.begin()
        lc.reset()
        assert not lc.succeed(rid, "late")
        assert lc.status is RequestStatus.IDLE

    def test_state_snapshot_is_frozen(self):
        lc = RequestLifecycle("creation")
        snapshot = lc.state
        lc.begin()
        assert snapshot.status is RequestStatus.IDLE
