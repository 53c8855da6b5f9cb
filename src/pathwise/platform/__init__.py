"""Host platform integrations (logging, filesystem helpers)."""
