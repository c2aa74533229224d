"""Interactive in-memory task manager."""
