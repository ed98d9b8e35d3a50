"""
Environmental regulation assistant backend.

FastAPI service for browsing environmental laws, chatting with an LLM about
selected laws with extracted legal citations, and AI compliance reports.
"""

__version__ = "0.1.0"
