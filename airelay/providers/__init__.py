"""Provider request strategies and endpoint functions."""
