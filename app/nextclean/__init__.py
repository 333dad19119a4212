"""nextclean - Find and remove stale Next.js build caches."""

__version__ = "0.1.0"
