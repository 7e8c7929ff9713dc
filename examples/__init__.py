"""Example consumers of the request builder."""
