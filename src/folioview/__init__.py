"""folioview - read-only dashboard for a managed investment portfolio."""

__version__ = "0.1.0"
