"""Moderated forum backend: users, posts and comments."""
