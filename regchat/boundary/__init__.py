"""Adapters for external systems: relational store, vector index, embeddings."""
