"""Chat notifications for CI build lifecycle events."""
