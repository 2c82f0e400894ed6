"""Shared fixtures for label tests."""

from __future__ import annotations

import pytest
from rdflib import Graph, Namespace

EX = Namespace("http://example.org/")
FOAF = Namespace("http://xmlns.com/foaf/0.1/")


@pytest.fixture
def graph() -> Graph:
    """Graph with only the ``ex`` and ``foaf`` bindings declared."""
    g = Graph(bind_namespaces="none")
    g.bind("ex", EX)
    g.bind("foaf", FOAF)
    return g
