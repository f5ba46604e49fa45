"""memberorder application layer: ordering core, rule service, reporters."""
