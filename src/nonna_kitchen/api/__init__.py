"""HTTP API for the Nonna Kitchen service."""
