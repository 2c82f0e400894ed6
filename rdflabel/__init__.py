"""Short labels for RDF graphs."""
