"""HTTP API for the Gopher translator."""
