"""
blog_node package initializer

Keep this module lightweight. Do not import FastAPI or uvicorn here,
so the stores can be used (and tested) without booting the API.
"""

__all__ = []
