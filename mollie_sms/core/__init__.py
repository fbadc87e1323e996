"""Cross-cutting pieces: errors and logging."""
