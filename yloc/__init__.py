"""Hardware topology graph with component types, adapters, modules and graph queries."""

__version__ = "0.1.0"