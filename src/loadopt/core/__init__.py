"""Geometry, bookkeeping and data models used by the packing engine."""
