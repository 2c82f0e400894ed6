"""Application configuration and shared constants."""

from __future__ import annotations

import os
from typing import Any, Dict

from rdflib.namespace import OWL, RDF, RDFS, XSD


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


CONFIG: Dict[str, Any] = {
    "LOV_API_URL": os.getenv(
        "RDFLABEL_LOV_API_URL",
        "https://lov.linkeddata.es/dataset/lov/api/v2/vocabulary/list",
    ),
    "LOV_TIMEOUT": float(os.getenv("RDFLABEL_LOV_TIMEOUT", "30")),
    "LOV_CACHE_PATH": os.getenv("RDFLABEL_LOV_CACHE_PATH", "data/lov_prefixes.json"),
    "LOV_ENABLED": _env_flag("RDFLABEL_LOV_ENABLED", True),
    "RESOLVE_MULTIPLE_TYPES": _env_flag("RDFLABEL_RESOLVE_MULTIPLE_TYPES", False),
    "FALLBACK_HASH_LENGTH": 8,
    "DEFAULT_NODE_COLOR": "#5C5F66",
    "BLANK_NODE_COLOR": "#B8B2A7",
    "TYPED_NODE_COLOR": "#3D5A80",
    "EDGE_COLOR": "#A9A9A9",
}

# Datatypes whose lexical form is rendered as a quoted string value.
STRING_DATATYPES = frozenset({str(XSD.string), str(RDF.langString)})

# Top-level types that never count as the most specific class of a resource.
UNIVERSAL_TYPES = frozenset({OWL.Thing, RDFS.Resource})

BLANK_NODE_PREFIX = "BN"
LITERAL_JOIN = " | "

GRAPH_CANVAS_HEIGHT = 720
VIS_FONT_FACE = "IBM Plex Sans"

SUPPORTED_RDF_FORMATS: Dict[str, str] = {
    "ttl": "turtle",
    "turtle": "turtle",
    "rdf": "xml",
    "xml": "xml",
    "owl": "xml",
    "nt": "nt",
    "n3": "n3",
    "jsonld": "json-ld",
    "json": "json-ld",
}
