"""Low-level SQL helpers, one module per table."""
