"""Content backend for a public information portal."""
