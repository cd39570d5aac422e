"""Service layer for the identity broker attribute importer."""
