"""cachefly command-line interface."""
