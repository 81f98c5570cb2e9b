"""Unit tests for the indexed model graph."""

import pytest

from gocam_analysis.exceptions import LookupMiss, MalformedModel
from gocam_analysis.model import ModelGraph

from conftest import make_activity, make_edge, make_model


@pytest.fixture
def graph():
    """Three activities, inserted out of id order, with a dangling edge."""
    model = make_model(
        [make_activity("c"), make_activity("a"), make_activity("b")],
        [make_edge("a", "b"), make_edge("c", "b"), make_edge("b", "zz"), make_edge("a", "c")],
    )
    return ModelGraph(model)


def test_all_activities_sorted_by_id(graph):
    assert [a.id for a in graph.all_activities()] == ["a", "b", "c"]
    assert graph.activity_ids() == ("a", "b", "c")
    assert len(graph) == 3


def test_activity_lookup_miss_is_explicit(graph):
    assert graph.activity("a").id == "a"
    assert graph.activity("zz") is None
    assert graph.has_activity("b")
    assert not graph.has_activity("zz")


def test_require_activity_raises_lookup_miss(graph):
    with pytest.raises(LookupMiss) as exc_info:
        graph.require_activity("zz")

    assert exc_info.value.activity_id == "zz"
    assert "zz" in str(exc_info.value)
    # LookupMiss is still a KeyError for callers that treat it as one
    assert isinstance(exc_info.value, KeyError)


def test_activity_index_is_stable(graph):
    assert graph.activity_index("a") == 0
    assert graph.activity_index("c") == 2
    assert graph.activity_index("zz") is None


def test_edges_by_endpoint_in_document_order(graph):
    assert [(e.subject, e.object) for e in graph.outgoing_edges("a")] == [("a", "b"), ("a", "c")]
    assert [(e.subject, e.object) for e in graph.incoming_edges("b")] == [("a", "b"), ("c", "b")]
    assert [(e.subject, e.object) for e in graph.outgoing_edges("b")] == [("b", "zz")]
    # Dangling ids are still indexed as edge endpoints
    assert [(e.subject, e.object) for e in graph.incoming_edges("zz")] == [("b", "zz")]
    assert graph.incoming_edges("a") == ()
    assert graph.outgoing_edges("nope") == ()


def test_dangling_and_self_loop_helpers():
    model = make_model([make_activity("a")], [make_edge("a", "a"), make_edge("a", "x")])
    graph = ModelGraph(model)
    loop, dangling = graph.all_edges()

    assert graph.is_self_loop(loop)
    assert not graph.is_dangling(loop)
    assert graph.is_dangling(dangling)
    assert graph.resolved_edges() == []


def test_duplicate_activity_ids_are_malformed():
    model = make_model([make_activity("a"), make_activity("b"), make_activity("a")])

    with pytest.raises(MalformedModel) as exc_info:
        ModelGraph(model)

    assert exc_info.value.details["duplicate_ids"] == ["a"]


def test_empty_model():
    graph = ModelGraph(make_model())

    assert graph.all_activities() == ()
    assert graph.all_edges() == ()
    assert len(graph) == 0
