"""Unit tests for the marketplace database layer.

Covers entity definitions, insert and view schemas, engine helpers and the
repositories (against a mocked session).
"""
