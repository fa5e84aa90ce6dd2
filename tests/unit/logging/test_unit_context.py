# tests/unit/logging/test_unit_context.py — v1
"""Tests for logging/context.py: per-request log context."""

from __future__ import annotations

import contextvars

from altdecision.logging.context import (
    LogContext,
    clear_context,
    get_context,
    set_request_context,
    set_stage,
)


class TestLogContext:
    def test_as_dict_drops_none(self):
        assert LogContext(request_id="r").as_dict() == {"request_id": "r"}

    def test_empty(self):
        assert LogContext().as_dict() == {}


class TestContextVars:
    def test_set_and_get(self):
        set_request_context("r1")
        set_stage("confidence")
        ctx = get_context()
        assert ctx.request_id == "r1"
        assert ctx.stage == "confidence"

    def test_new_request_resets_stage(self):
        set_request_context("r1")
        set_stage("decision")
        set_request_context("r2")
        assert get_context().stage is None

    def test_clear(self):
        set_request_context("r1")
        clear_context()
        assert get_context() == LogContext()

    def test_isolated_between_contexts(self):
        set_request_context("outer")

        def _inner():
            set_request_context("inner")
            return get_context().request_id

        assert contextvars.copy_context().run(_inner) == "inner"
        assert get_context().request_id == "outer"
