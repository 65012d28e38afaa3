# blog_node/__main__.py
"""
Entry point for running the blog node as a module:
    python -m blog_node [--host 127.0.0.1] [--port 8080] [--config blog_config.yaml]
                        [--log-level INFO]
Env toggles:
  BLOG_CONFIG=...            -> YAML config path (default ./blog_config.yaml)
  BLOG_HOST / BLOG_PORT      -> bind address
  BLOG_LOG_LEVEL             -> logging level
  BLOG_LOCK_TIMEOUT_SEC      -> bounded wait on store locks (negative = forever)
  BLOG_CORS_ORIGINS          -> comma-separated CORS origins
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from .blog_api import create_app
from .config import get_bind_host, get_bind_port, get_log_level, load_config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
    return logging.getLogger("blog_node")


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="blog-node",
        description="Run the in-memory blog server (JSON API + HTML front page)",
    )
    p.add_argument("--config", default=None, help="Path to YAML config (default: ./blog_config.yaml)")
    p.add_argument("--host", default=None, help="Bind address (default from config: 127.0.0.1)")
    p.add_argument("--port", type=int, default=None, help="Port (default from config: 8080)")
    p.add_argument("--log-level", default=None, help="Logging level (default from config: INFO)")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    cfg = load_config(args.config)

    level = (args.log_level or get_log_level(cfg)).upper()
    log = configure_logging(level)

    host = args.host or get_bind_host(cfg)
    port = args.port if args.port is not None else get_bind_port(cfg)

    app = create_app(cfg)
    log.info("Blog node listening on http://%s:%s", host, port)
    uvicorn.run(app, host=host, port=port, log_level=level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
