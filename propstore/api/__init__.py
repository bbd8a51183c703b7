"""PropStore API package."""
