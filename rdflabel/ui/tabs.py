"""Logic for the Labels, Graph and Export tabs."""

from __future__ import annotations

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from rdflabel.config import GRAPH_CANVAS_HEIGHT
from rdflabel.data_processing import build_label_rows
from rdflabel.export import build_network, convert_graph_to_gexf, graph_to_networkx
from rdflabel.ui.sidebar import SidebarState


def render_tabs(state: SidebarState) -> None:
    tabs = st.tabs(["Labels", "Graph View", "Export"])
    rdf_graph = st.session_state.rdf_graph
    if rdf_graph is None or len(rdf_graph) == 0:
        for tab in tabs:
            with tab:
                st.info("Upload an RDF file to get started.")
        return

    with tabs[0]:
        st.header("Resource Labels")
        rows = build_label_rows(rdf_graph, state.registry, state.resolve_ambiguous)
        st.dataframe(pd.DataFrame(rows), use_container_width=True)

    nx_graph = graph_to_networkx(
        rdf_graph,
        state.registry,
        resolve_ambiguous=state.resolve_ambiguous,
        include_type_edges=state.include_type_edges,
    )

    with tabs[1]:
        st.header("Network Graph")
        with st.spinner("Generating Network Graph..."):
            net = build_network(nx_graph)
            components.html(net.generate_html(), height=GRAPH_CANVAS_HEIGHT + 40, scrolling=False)

    with tabs[2]:
        st.header("Export")
        st.download_button(
            "Download GEXF",
            data=convert_graph_to_gexf(nx_graph),
            file_name="labelled-graph.gexf",
            mime="application/xml",
        )
