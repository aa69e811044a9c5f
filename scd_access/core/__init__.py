"""Core data model and schema for Spatial Content Records."""
