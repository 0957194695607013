"""Validate example metadata in a project manifest and render a catalog."""
