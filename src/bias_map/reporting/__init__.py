"""Derived result views and their Markdown rendering."""
