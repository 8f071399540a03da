"""Core building blocks shared across hookstorm features."""
