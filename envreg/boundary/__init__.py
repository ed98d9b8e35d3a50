"""Boundary adapters: database persistence and the hosted LLM gateway."""
