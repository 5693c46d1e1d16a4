"""Core presentation pipeline: metrics, sizes, colors, rendering."""
