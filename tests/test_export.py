"""Tests for the labelled graph export."""

from __future__ import annotations

import networkx as nx
from rdflib import BNode, Graph, Literal
from rdflib.namespace import RDF, RDFS

from rdflabel.export import build_network, collect_labeled_graph, convert_graph_to_gexf, graph_to_networkx

from conftest import EX, FOAF


def _people(graph: Graph) -> Graph:
    graph.bind("rdf", RDF)
    graph.bind("rdfs", RDFS)
    graph.add((EX.alice, RDF.type, FOAF.Person))
    graph.add((EX.alice, FOAF.name, Literal("Alice")))
    graph.add((EX.alice, RDFS.label, Literal("Alicia", lang="es")))
    graph.add((EX.alice, RDFS.label, Literal("Alice", lang="en")))
    graph.add((EX.alice, FOAF.knows, EX.bob))
    graph.add((EX.bob, FOAF.age, Literal(42)))
    return graph


def test_collect_labeled_graph(graph: Graph) -> None:
    """Literal triples become properties, resource triples become edges."""
    nodes, edges = collect_labeled_graph(_people(graph))
    by_id = {node.id: node for node in nodes}
    alice = by_id["ex_alice"]
    assert alice.label == "ex_alice:foaf_Person"
    assert alice.uri == "http://example.org/alice"
    assert alice.types == ["foaf_Person"]
    assert alice.properties["foaf_name"] == '"Alice"'
    assert alice.properties["rdfs_label_en"] == '"Alice"'
    assert alice.properties["rdfs_label_es"] == '"Alicia"'
    assert by_id["ex_bob"].properties["foaf_age"] == "42"
    assert {(e.source, e.label, e.target) for e in edges} == {
        ("ex_alice", "rdf_type", "foaf_Person"),
        ("ex_alice", "foaf_knows", "ex_bob"),
    }


def test_repeated_literal_properties_are_joined(graph: Graph) -> None:
    """Multiple values for one property end up in one attribute."""
    graph.add((EX.alice, FOAF.nick, Literal("al")))
    graph.add((EX.alice, FOAF.nick, Literal("ally")))
    nodes, _ = collect_labeled_graph(graph)
    assert nodes[0].properties["foaf_nick"] == '"al" | "ally"'


def test_graph_to_networkx(graph: Graph) -> None:
    """The networkx graph carries labels and URIs."""
    nx_graph = graph_to_networkx(_people(graph))
    assert isinstance(nx_graph, nx.MultiDiGraph)
    assert set(nx_graph.nodes) == {"ex_alice", "ex_bob", "foaf_Person"}
    assert nx_graph.nodes["ex_alice"]["label"] == "ex_alice:foaf_Person"
    assert nx_graph.nodes["ex_bob"]["uri"] == "http://example.org/bob"
    assert nx_graph.number_of_edges() == 2

    without_types = graph_to_networkx(graph, include_type_edges=False)
    assert without_types.number_of_edges() == 1


def test_blank_nodes_are_exported(graph: Graph) -> None:
    """Blank node objects become BN nodes."""
    address = BNode("addr1")
    graph.add((EX.alice, EX.address, address))
    graph.add((address, EX.city, Literal("Leipzig")))
    nx_graph = graph_to_networkx(graph)
    assert "BNaddr1" in nx_graph.nodes
    assert nx_graph.nodes["BNaddr1"]["ex_city"] == '"Leipzig"'


def test_convert_graph_to_gexf(graph: Graph) -> None:
    """GEXF output contains the node labels."""
    gexf = convert_graph_to_gexf(graph_to_networkx(_people(graph)))
    assert gexf.startswith("<?xml")
    assert "ex_alice:foaf_Person" in gexf
    assert "foaf_knows" in gexf


def test_build_network(graph: Graph) -> None:
    """Every networkx node and edge reaches the pyvis network."""
    nx_graph = graph_to_networkx(_people(graph))
    net = build_network(nx_graph, height=400)
    assert {node["id"] for node in net.nodes} == set(nx_graph.nodes)
    assert len(net.edges) == nx_graph.number_of_edges()
    alice = next(node for node in net.nodes if node["id"] == "ex_alice")
    assert alice["label"] == "ex_alice:foaf_Person"


def test_colliding_labels_get_distinct_nodes(graph: Graph) -> None:
    """Resources whose labels escape alike stay separate nodes."""
    graph.add((EX["a-b"], RDFS.comment, Literal("first")))
    graph.add((EX["a_b"], RDFS.comment, Literal("second")))
    graph.add((EX["a_b"], FOAF.knows, EX["a-b"]))
    nx_graph = graph_to_networkx(graph)
    assert nx_graph.number_of_nodes() == 2
    assert nx_graph.nodes["ex_a_b"]["uri"] == "http://example.org/a-b"
    assert nx_graph.nodes["ex_a_b_2"]["uri"] == "http://example.org/a_b"
    comment_key = next(key for key in nx_graph.nodes["ex_a_b"] if key.endswith("comment"))
    assert nx_graph.nodes["ex_a_b"][comment_key] == '"first"'
    assert nx_graph.nodes["ex_a_b_2"][comment_key] == '"second"'
    assert list(nx_graph.edges("ex_a_b_2")) == [("ex_a_b_2", "ex_a_b")]


def test_reserved_property_names_are_kept() -> None:
    """Literal properties named like node attributes are stored under prop:."""
    g = Graph(bind_namespaces="none")
    g.bind("", EX)
    g.add((EX.alice, EX["label"], Literal("Alice the person")))
    g.add((EX.alice, EX["uri"], Literal("urn:x")))
    attrs = graph_to_networkx(g).nodes["alice"]
    assert attrs["label"] == "alice"
    assert attrs["uri"] == "http://example.org/alice"
    assert attrs["prop:label"] == '"Alice the person"'
    assert attrs["prop:uri"] == '"urn:x"'
