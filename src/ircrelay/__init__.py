"""IRC <-> Discord relay: formatting conversion and message pipeline."""

__version__ = "0.1.0"
