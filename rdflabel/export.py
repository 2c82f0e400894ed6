"""Labelled graph export (networkx, GEXF, pyvis)."""

from __future__ import annotations

import io
import logging
from typing import Dict, List, Mapping, Optional, Set, Tuple

import networkx as nx
from pyvis.network import Network
from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import RDF
from rdflib.term import Node

from rdflabel.config import CONFIG, GRAPH_CANVAS_HEIGHT, LITERAL_JOIN, VIS_FONT_FACE
from rdflabel.labels import (
    declared_types,
    literal_value,
    property_label,
    resource_label,
    resource_label_with_type,
)
from rdflabel.models import LabeledEdge, LabeledNode
from rdflabel.prefixes import namespace_bindings
from rdflabel.utils import _truncate_text, profile_time

RESERVED_NODE_ATTRS = frozenset({"label", "uri", "types"})


def collect_labeled_graph(
    graph: Graph,
    registry: Optional[Mapping[str, str]] = None,
    resolve_ambiguous: Optional[bool] = None,
) -> Tuple[List[LabeledNode], List[LabeledEdge]]:
    """Label every resource and triple of ``graph``.

    Literal-valued triples become node properties; resource-valued triples become edges.
    """
    if resolve_ambiguous is None:
        resolve_ambiguous = CONFIG["RESOLVE_MULTIPLE_TYPES"]
    bindings = namespace_bindings(graph)
    nodes: Dict[Node, LabeledNode] = {}
    used_ids: Set[str] = set()

    def _unique_id(resource) -> str:
        base = resource_label(graph, resource, registry, bindings)
        node_id = base
        suffix = 2
        while node_id in used_ids:
            node_id = f"{base}_{suffix}"
            suffix += 1
        if node_id != base:
            logging.warning("Label %s already taken; using %s for %s.", base, node_id, resource)
        used_ids.add(node_id)
        return node_id

    def _ensure_node(resource) -> LabeledNode:
        node = nodes.get(resource)
        if node is None:
            node_id = _unique_id(resource)
            node = LabeledNode(
                id=node_id,
                label=resource_label_with_type(graph, resource, registry, bindings, resolve_ambiguous),
                uri=str(resource),
                types=[resource_label(graph, t, registry, bindings) for t in declared_types(graph, resource)],
            )
            nodes[resource] = node
        return node

    edges: List[LabeledEdge] = []
    for s, p, o in sorted(graph, key=lambda triple: tuple(str(term) for term in triple)):
        if not isinstance(s, (URIRef, BNode)):
            continue
        subj = _ensure_node(s)
        if isinstance(o, Literal):
            key = property_label(graph, p, o, registry, bindings)
            value = literal_value(o)
            existing = subj.properties.get(key)
            subj.properties[key] = value if existing is None else existing + LITERAL_JOIN + value
            continue
        obj = _ensure_node(o)
        edges.append(
            LabeledEdge(
                source=subj.id,
                target=obj.id,
                label=property_label(graph, p, None, registry, bindings),
                uri=str(p),
            )
        )
    return list(nodes.values()), edges


@profile_time
def graph_to_networkx(
    graph: Graph,
    registry: Optional[Mapping[str, str]] = None,
    resolve_ambiguous: Optional[bool] = None,
    include_type_edges: bool = True,
) -> nx.MultiDiGraph:
    nodes, edges = collect_labeled_graph(graph, registry, resolve_ambiguous)
    out = nx.MultiDiGraph()
    for node in nodes:
        attrs = {"label": node.label, "uri": node.uri, "types": ", ".join(node.types)}
        for key, value in node.properties.items():
            if key in RESERVED_NODE_ATTRS:
                logging.warning(
                    "Property %s on %s clashes with a node attribute; stored as prop:%s.", key, node.id, key
                )
                key = "prop:" + key
            attrs[key] = value
        out.add_node(node.id, **attrs)
    for edge in edges:
        if not include_type_edges and edge.uri == str(RDF.type):
            continue
        out.add_edge(edge.source, edge.target, key=edge.label, label=edge.label, uri=edge.uri)
    logging.info("Labelled graph has %s node(s) and %s edge(s).", out.number_of_nodes(), out.number_of_edges())
    return out


def convert_graph_to_gexf(nx_graph: nx.MultiDiGraph) -> str:
    output = io.BytesIO()
    nx.write_gexf(nx_graph, output, encoding="utf-8")
    return output.getvalue().decode("utf-8")


def _node_color(attrs: Dict[str, str]) -> str:
    if str(attrs.get("uri", "")).startswith(("http://", "https://", "urn:")):
        return CONFIG["TYPED_NODE_COLOR"] if attrs.get("types") else CONFIG["DEFAULT_NODE_COLOR"]
    return CONFIG["BLANK_NODE_COLOR"]


def _node_title(node_id: str, attrs: Dict[str, str]) -> str:
    lines = [str(attrs.get("label", node_id)), str(attrs.get("uri", ""))]
    for key, value in sorted(attrs.items()):
        if key in ("label", "uri", "types"):
            continue
        lines.append(f"{key}: {_truncate_text(value)}")
    return "\n".join(line for line in lines if line)


def build_network(nx_graph: nx.MultiDiGraph, height: int = GRAPH_CANVAS_HEIGHT) -> Network:
    net = Network(height=f"{height}px", width="100%", directed=True, notebook=False)
    for node_id, attrs in nx_graph.nodes(data=True):
        net.add_node(
            node_id,
            label=str(attrs.get("label", node_id)),
            title=_node_title(node_id, attrs),
            color=_node_color(attrs),
            shape="dot",
            size=16,
            font={"size": 14, "face": VIS_FONT_FACE},
        )
    for src, dst, attrs in nx_graph.edges(data=True):
        net.add_edge(
            src,
            dst,
            label=attrs.get("label", ""),
            title=attrs.get("uri", ""),
            color=CONFIG["EDGE_COLOR"],
            arrows="to",
            font={"size": 9, "align": "middle", "face": VIS_FONT_FACE},
        )
    logging.debug("Built pyvis network with %s node(s).", len(net.nodes))
    return net
