"""Namespace prefix resolution for short labels (e.g. ``rdfs_`` in ``rdfs_label``)."""

from __future__ import annotations

import hashlib
from typing import Dict, Mapping, Optional, Tuple

from rdflib import Graph
from rdflib.namespace import split_uri

from rdflabel.config import CONFIG


def stable_hash(text: str, length: Optional[int] = None) -> str:
    """SHA-1 hex prefix used for the fallback namespace prefix."""
    length = length or CONFIG["FALLBACK_HASH_LENGTH"]
    return hashlib.sha1(text.encode("utf-8")).hexdigest()[:length]


def split_namespace(uri: str) -> Tuple[str, str]:
    """Split ``uri`` into ``(namespace, local_name)``.

    The local name is the longest trailing XML NCName. URIs without one keep the
    whole string as namespace and get an empty local name.
    """
    try:
        namespace, local = split_uri(uri)
    except ValueError:
        return uri, ""
    return str(namespace), str(local)


def namespace_bindings(graph: Graph) -> Dict[str, str]:
    """Return the graph's declared bindings as ``{namespace: prefix}``."""
    bindings: Dict[str, str] = {}
    for prefix, namespace in graph.namespaces():
        bindings.setdefault(str(namespace), str(prefix))
    return bindings


def resolve_prefix(
    namespace: str,
    local_bindings: Mapping[str, str],
    registry: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Resolve the label prefix for ``namespace``.
    Local bindings win, then the vocabulary registry, then a hash of the namespace.
    A namespace bound to the empty prefix yields no prefix at all.
    """
    prefix = local_bindings.get(namespace)
    if prefix is not None:
        if not prefix:
            return ""
        return prefix + "_"
    if registry is not None:
        registry_prefix = registry.get(namespace)
        if registry_prefix:
            return registry_prefix + "_"
    return "p" + stable_hash(namespace) + "_"


def prefix_prefix(
    uri: str,
    graph: Graph,
    registry: Optional[Mapping[str, str]] = None,
    bindings: Optional[Mapping[str, str]] = None,
) -> str:
    namespace, _ = split_namespace(uri)
    if bindings is None:
        bindings = namespace_bindings(graph)
    return resolve_prefix(namespace, bindings, registry)
