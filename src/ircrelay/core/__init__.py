"""Shared relay primitives."""
