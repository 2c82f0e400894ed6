"""RDF ingestion and label tables."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional, Tuple

import requests
from rdflib import BNode, Graph as RDFGraph, URIRef

from rdflabel.config import CONFIG, SUPPORTED_RDF_FORMATS
from rdflabel.labels import resource_label, resource_label_with_type
from rdflabel.prefixes import namespace_bindings


def parse_rdf_data(content: str, file_extension: str) -> RDFGraph:
    fmt = SUPPORTED_RDF_FORMATS.get(file_extension.lower().lstrip("."))
    if fmt is None:
        raise ValueError("Unsupported RDF format.")
    rdf_graph = RDFGraph()
    rdf_graph.parse(data=content, format=fmt)
    return rdf_graph


def _format_from_response(uri: str, content_type: str) -> str:
    if "application/ld+json" in content_type:
        return "json-ld"
    if "application/rdf+xml" in content_type:
        return "xml"
    if "text/turtle" in content_type or uri.endswith(".ttl"):
        return "turtle"
    if "application/n-triples" in content_type or uri.endswith(".nt"):
        return "nt"
    return "xml"


def dereference_uri(uri: str, timeout: float = 10) -> Optional[Tuple[RDFGraph, int]]:
    try:
        headers = {
            "Accept": "application/ld+json, application/rdf+xml, text/turtle, application/n-triples;q=0.9"
        }
        response = requests.get(uri, headers=headers, timeout=timeout)
        response.raise_for_status()
        fmt = _format_from_response(uri, response.headers.get("Content-Type", "").lower())
        new_graph = RDFGraph()
        new_graph.parse(data=response.text, format=fmt)
        triple_count = len(new_graph)
        logging.info(
            "Successfully dereferenced URI '%s' with %s triple(s) (format: %s).",
            uri,
            triple_count,
            fmt,
        )
        return new_graph, triple_count
    except Exception as exc:
        logging.error("Error dereferencing URI '%s': %s", uri, exc)
        return None


def build_label_rows(
    rdf_graph: RDFGraph,
    registry: Optional[Mapping[str, str]] = None,
    resolve_ambiguous: Optional[bool] = None,
) -> List[Dict[str, str]]:
    """One row per subject with its short label and its type-qualified label."""
    if resolve_ambiguous is None:
        resolve_ambiguous = CONFIG["RESOLVE_MULTIPLE_TYPES"]
    bindings = namespace_bindings(rdf_graph)
    subjects = {s for s in rdf_graph.subjects() if isinstance(s, (URIRef, BNode))}
    rows = []
    for subject in sorted(subjects, key=str):
        rows.append(
            {
                "uri": str(subject),
                "label": resource_label(rdf_graph, subject, registry, bindings),
                "label_with_type": resource_label_with_type(
                    rdf_graph, subject, registry, bindings, resolve_ambiguous
                ),
            }
        )
    return rows
