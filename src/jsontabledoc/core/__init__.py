"""Traversal, classification and Markdown rendering of JSON documents."""
