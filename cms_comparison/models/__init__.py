"""Typed domain models for CMS entries, filter fields and application state."""
