"""Short, human-readable labels for RDF resources, properties and literals."""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence, Union

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import RDF
from rdflib.term import Node

from rdflabel.config import BLANK_NODE_PREFIX, STRING_DATATYPES, UNIVERSAL_TYPES
from rdflabel.escaping import escape_node_name, escape_string_value
from rdflabel.hierarchy import collect_superclasses
from rdflabel.prefixes import namespace_bindings, prefix_prefix, split_namespace
from rdflabel.utils import _dedupe_preserve

Resource = Union[URIRef, BNode]


def property_label(
    graph: Graph,
    prop: URIRef,
    node: Optional[Node] = None,
    registry: Optional[Mapping[str, str]] = None,
    bindings: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Return ``prefix_localName`` for ``prop``.
    When ``node`` is a language-tagged literal the tag is appended, e.g. ``rdfs_label_en``.
    """
    _, local = split_namespace(str(prop))
    name = prefix_prefix(str(prop), graph, registry, bindings) + local
    if isinstance(node, Literal) and node.language:
        return name + "_" + node.language
    return name


def resource_label(
    graph: Graph,
    resource: Resource,
    registry: Optional[Mapping[str, str]] = None,
    bindings: Optional[Mapping[str, str]] = None,
) -> str:
    """Simple label for a resource; blank nodes get an id based label."""
    if isinstance(resource, BNode):
        label = BLANK_NODE_PREFIX + str(resource)
    else:
        _, local = split_namespace(str(resource))
        label = prefix_prefix(str(resource), graph, registry, bindings) + local
    return escape_node_name(label)


def _is_string_literal(literal: Literal) -> bool:
    return literal.datatype is None or str(literal.datatype) in STRING_DATATYPES


def literal_value(node: Node) -> str:
    """Render a node as a value: quoted for strings, verbatim otherwise.

    Resources are rendered as their full identifier.
    """
    if isinstance(node, Literal):
        value = str(node)
        if _is_string_literal(node):
            return '"' + escape_string_value(value) + '"'
        return value
    return str(node)


def declared_types(graph: Graph, resource: Resource) -> List[URIRef]:
    return _dedupe_preserve(t for t in graph.objects(resource, RDF.type) if isinstance(t, URIRef))


def most_specific_type(graph: Graph, types: Sequence[URIRef]) -> Optional[URIRef]:
    """
    Pick the most specific of several declared types.

    Universal types (owl:Thing, rdfs:Resource) are ignored, as is any candidate
    that is a superclass of another candidate. Among the survivors the class with
    the most ancestors wins; ties go to the smallest URI.
    """
    candidates = [t for t in _dedupe_preserve(types) if t not in UNIVERSAL_TYPES]
    if not candidates:
        return None
    ancestors = {t: set(collect_superclasses(graph, t)) for t in candidates}
    specific = [
        t for t in candidates if not any(t in ancestors[other] for other in candidates if other != t)
    ]
    if not specific:
        # every candidate is an ancestor of another one: a subclass cycle
        specific = candidates
    return min(specific, key=lambda t: (-len(ancestors[t]), str(t)))


def resource_label_with_type(
    graph: Graph,
    resource: Resource,
    registry: Optional[Mapping[str, str]] = None,
    bindings: Optional[Mapping[str, str]] = None,
    resolve_ambiguous: bool = False,
) -> str:
    """
    Return ``label:TypeLabel`` when the resource has exactly one named type,
    otherwise the bare label. With ``resolve_ambiguous`` several types are narrowed
    down to the most specific one instead.
    """
    if bindings is None:
        bindings = namespace_bindings(graph)
    base = resource_label(graph, resource, registry, bindings)
    types = declared_types(graph, resource)
    if len(types) == 1:
        return base + ":" + resource_label(graph, types[0], registry, bindings)
    if len(types) > 1 and resolve_ambiguous:
        chosen = most_specific_type(graph, types)
        if chosen is not None:
            return base + ":" + resource_label(graph, chosen, registry, bindings)
    return base
