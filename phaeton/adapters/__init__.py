"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Map extracts (OSM PBF/XML through pyosmium, in-memory primitives)
- Graph snapshots (msgpack files)
"""
