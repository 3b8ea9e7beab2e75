"""Configuration, logging, middleware and error handling."""
