"""Postboard: a small social posting API backed by JSON files."""
