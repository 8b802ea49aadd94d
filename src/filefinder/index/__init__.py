"""In-memory file indexes."""
