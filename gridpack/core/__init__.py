"""Pure grid-packing algorithms and value types."""
