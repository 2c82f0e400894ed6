"""Sidebar logic and session state initialization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import streamlit as st
from rdflib import Graph as RDFGraph

from rdflabel.config import CONFIG
from rdflabel.data_processing import dereference_uri, parse_rdf_data
from rdflabel.vocab_registry import VocabularyRegistry, load_vocabulary_registry


@dataclass
class SidebarState:
    registry: VocabularyRegistry
    resolve_ambiguous: bool
    include_type_edges: bool


@st.cache_resource(show_spinner=False)
def get_vocabulary_registry(use_lov: bool) -> VocabularyRegistry:
    if not use_lov:
        return VocabularyRegistry()
    return load_vocabulary_registry()


def init_session_state() -> None:
    if "rdf_graph" not in st.session_state:
        st.session_state.rdf_graph = None
    if "upload_signature" not in st.session_state:
        st.session_state.upload_signature = None
    if "upload_errors" not in st.session_state:
        st.session_state.upload_errors = []


def _load_uploaded_files(uploaded_files) -> RDFGraph:
    merged = RDFGraph()
    errors: List[str] = []
    for uploaded in uploaded_files:
        extension = uploaded.name.rsplit(".", 1)[-1] if "." in uploaded.name else ""
        try:
            content = uploaded.read().decode("utf-8")
            parsed = parse_rdf_data(content, extension)
        except Exception as exc:
            logging.error("Error parsing %s: %s", uploaded.name, exc)
            errors.append(f"{uploaded.name}: {exc}")
            continue
        merged += parsed
        for prefix, namespace in parsed.namespaces():
            merged.bind(prefix, namespace, override=False)
    st.session_state.upload_errors = errors
    return merged


def render_sidebar() -> SidebarState:
    with st.sidebar.expander("File Upload", expanded=True):
        uploaded_files = st.file_uploader(
            "Upload RDF Files",
            type=["ttl", "rdf", "owl", "nt", "n3", "jsonld"],
            accept_multiple_files=True,
            help="Namespace prefixes declared in the files are used for the labels.",
        )
        if uploaded_files:
            upload_signature = [(file.name, file.size) for file in uploaded_files]
            if st.session_state.upload_signature != upload_signature:
                st.session_state.upload_signature = upload_signature
                st.session_state.rdf_graph = _load_uploaded_files(uploaded_files)
        for error in st.session_state.upload_errors:
            st.error(error)

    with st.sidebar.expander("URI Dereferencing"):
        uri_input = st.text_input("Resource URI")
        if st.button("Fetch") and uri_input.strip():
            result = dereference_uri(uri_input.strip())
            if result is None:
                st.error("Could not dereference the URI.")
            else:
                fetched, count = result
                base: Optional[RDFGraph] = st.session_state.rdf_graph
                st.session_state.rdf_graph = fetched if base is None else base + fetched
                st.success(f"Loaded {count} triple(s).")

    with st.sidebar.expander("Label Settings"):
        use_lov = st.checkbox(
            "Use LOV vocabulary prefixes",
            value=CONFIG["LOV_ENABLED"],
            help="Fall back to Linked Open Vocabularies prefixes for undeclared namespaces.",
        )
        resolve_ambiguous = st.checkbox(
            "Resolve multiple types to the most specific one",
            value=CONFIG["RESOLVE_MULTIPLE_TYPES"],
        )
        include_type_edges = st.checkbox("Show rdf:type edges", value=True)

    with st.spinner("Loading vocabulary prefixes..."):
        registry = get_vocabulary_registry(use_lov)
    st.sidebar.caption(f"{len(registry)} vocabulary prefix(es) available.")

    return SidebarState(
        registry=registry,
        resolve_ambiguous=resolve_ambiguous,
        include_type_edges=include_type_edges,
    )
