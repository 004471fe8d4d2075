"""CLI package for folioview."""
