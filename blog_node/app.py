"""
blog_node/app.py
----------------
Thin entrypoint for running the blog FastAPI app via:

    uvicorn blog_node.app:app

All real route wiring lives in blog_node.blog_api.
"""

from .blog_api import app as app  # re-export for uvicorn


if __name__ == "__main__":
    # Convenience for: python -m blog_node.app
    from .__main__ import main

    raise SystemExit(main())
