"""Configuration, logging and export plumbing."""
