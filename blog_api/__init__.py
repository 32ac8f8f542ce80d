"""Blog API: users, posts, comments and categories behind token auth."""

__version__ = "1.0.0"
