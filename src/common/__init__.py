"""Helpers shared by the CLI and the manifest retrieval layer."""
