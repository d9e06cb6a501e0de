"""Configuration and logging shared by the preview modules."""
