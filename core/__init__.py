"""Core contracts: data shapes, error types, extractor interface and registry."""
