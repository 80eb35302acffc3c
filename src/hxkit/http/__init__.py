"""Read-only views over request metadata."""
