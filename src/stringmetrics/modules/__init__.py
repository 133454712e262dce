"""Metric engines and the list-level services built on them."""
