#!/usr/bin/env python
"""
RDF Label Explorer - Streamlit entrypoint.
"""

from rdflabel.ui import render_app


def main() -> None:
    render_app()


if __name__ == "__main__":
    main()
