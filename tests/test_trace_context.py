from gogox.context import background
from gogox.trace.context import new_context, trace_from_context


def test_new_context_with_none_parent():
    ctx = new_context(None, "")
    assert trace_from_context(ctx) == ""


def test_trace_from_none_context():
    assert trace_from_context(None) == ""


def test_trace_from_context_without_trace():
    assert trace_from_context(background()) == ""


def test_returns_trace_if_exists():
    ctx = new_context(background(), "mytrace")
    assert trace_from_context(ctx) == "mytrace"


def test_child_trace_does_not_affect_parent():
    parent = new_context(background(), "first")
    child = new_context(parent, "second")
    assert trace_from_context(parent) == "first"
    assert trace_from_context(child) == "second"