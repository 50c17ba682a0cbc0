"""HTTP transport for ClearFind."""
