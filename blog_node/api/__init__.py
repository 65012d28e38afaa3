"""HTTP routers for the blog node (posts, comments, health, front page)."""
