"""Feature modules for hookstorm."""
