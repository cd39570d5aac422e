"""Data models for the identity broker attribute importer."""
