"""Tests for namespace prefix resolution."""

from __future__ import annotations

import hashlib

import pytest
from rdflib import Graph

from rdflabel.prefixes import (
    namespace_bindings,
    prefix_prefix,
    resolve_prefix,
    split_namespace,
    stable_hash,
)
from rdflabel.vocab_registry import VocabularyRegistry

RDFS_NS = "http://www.w3.org/2000/01/rdf-schema#"
DCT_NS = "http://purl.org/dc/terms/"


def _expected_fallback(namespace: str) -> str:
    return "p" + hashlib.sha1(namespace.encode("utf-8")).hexdigest()[:8] + "_"


def test_local_binding_wins() -> None:
    """A locally declared prefix is used with a trailing underscore."""
    registry = VocabularyRegistry({DCT_NS: "dcterms"})
    assert resolve_prefix(DCT_NS, {DCT_NS: "dc"}, registry) == "dc_"


def test_empty_local_binding_means_no_prefix() -> None:
    """The default namespace produces neither prefix nor separator."""
    registry = VocabularyRegistry({DCT_NS: "dcterms"})
    assert resolve_prefix(DCT_NS, {DCT_NS: ""}, registry) == ""


def test_registry_used_when_not_bound_locally() -> None:
    """The vocabulary registry is the second tier."""
    registry = VocabularyRegistry({DCT_NS: "dcterms"})
    assert resolve_prefix(DCT_NS, {}, registry) == "dcterms_"


def test_hash_fallback() -> None:
    """Unknown namespaces get a hash based prefix."""
    assert resolve_prefix(RDFS_NS, {}, VocabularyRegistry()) == _expected_fallback(RDFS_NS)
    assert resolve_prefix(RDFS_NS, {}, None) == _expected_fallback(RDFS_NS)


def test_hash_fallback_is_stable_and_distinct() -> None:
    """Same namespace, same prefix; different namespaces, different prefixes."""
    first = resolve_prefix("http://example.org/a#", {}, None)
    assert first == resolve_prefix("http://example.org/a#", {}, None)
    assert first != resolve_prefix("http://example.org/b#", {}, None)


def test_stable_hash_length() -> None:
    """The hash is a short hex string."""
    value = stable_hash(RDFS_NS)
    assert len(value) == 8
    int(value, 16)
    assert len(stable_hash(RDFS_NS, length=12)) == 12


@pytest.mark.parametrize(
    "uri, expected",
    [
        ("http://xmlns.com/foaf/0.1/Person", ("http://xmlns.com/foaf/0.1/", "Person")),
        ("http://www.w3.org/2000/01/rdf-schema#label", (RDFS_NS, "label")),
        ("http://example.org/my-thing", ("http://example.org/", "my-thing")),
        ("http://example.org/", ("http://example.org/", "")),
    ],
)
def test_split_namespace(uri: str, expected: tuple) -> None:
    """URIs split at the start of the trailing NCName."""
    assert split_namespace(uri) == expected


def test_namespace_bindings_from_graph() -> None:
    """Bindings are keyed by namespace."""
    g = Graph(bind_namespaces="none")
    g.bind("foaf", "http://xmlns.com/foaf/0.1/")
    g.bind("", "http://example.org/")
    bindings = namespace_bindings(g)
    assert bindings["http://xmlns.com/foaf/0.1/"] == "foaf"
    assert bindings["http://example.org/"] == ""


def test_prefix_prefix_reads_graph_bindings() -> None:
    """Without explicit bindings the graph's own are used."""
    g = Graph(bind_namespaces="none")
    g.bind("foaf", "http://xmlns.com/foaf/0.1/")
    assert prefix_prefix("http://xmlns.com/foaf/0.1/name", g) == "foaf_"
    assert prefix_prefix("http://xmlns.com/foaf/0.1/name", g, bindings={}) == _expected_fallback(
        "http://xmlns.com/foaf/0.1/"
    )
