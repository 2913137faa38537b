"""Utility modules for the TRON client context."""
