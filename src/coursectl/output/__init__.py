"""Output formatting: human (Rich), quiet, and JSON renderings of ServiceResult."""
