"""Application services composed by the API layer."""
