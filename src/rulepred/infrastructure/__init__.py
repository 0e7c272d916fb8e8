"""Infrastructure layer — rule file I/O and the in-memory rule catalog."""
