"""Platform integrations (logging)."""
