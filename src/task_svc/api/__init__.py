"""Application factory and entry point."""
