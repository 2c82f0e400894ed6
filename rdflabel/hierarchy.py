"""Traversal of ``rdfs:subClassOf`` hierarchies."""

from __future__ import annotations

from typing import Iterator, List, Set, Union

from rdflib import BNode, Graph, Literal, URIRef
from rdflib.namespace import RDFS

ClassNode = Union[URIRef, BNode]


def _direct_superclasses(graph: Graph, cls: ClassNode) -> List[ClassNode]:
    supers = [o for o in graph.objects(cls, RDFS.subClassOf) if not isinstance(o, Literal)]
    return sorted(set(supers), key=str)


def iter_superclasses(graph: Graph, cls: ClassNode) -> Iterator[ClassNode]:
    """
    Yield every transitive superclass of ``cls``, depth-first and pre-order.
    Each class is yielded once, so cyclic and diamond-shaped hierarchies terminate.
    ``cls`` itself is never yielded.
    """
    visited: Set[ClassNode] = {cls}
    stack = list(reversed(_direct_superclasses(graph, cls)))
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        yield current
        stack.extend(reversed(_direct_superclasses(graph, current)))


def collect_superclasses(graph: Graph, cls: ClassNode) -> List[ClassNode]:
    return list(iter_superclasses(graph, cls))
