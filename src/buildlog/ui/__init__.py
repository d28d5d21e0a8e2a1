"""User interfaces for buildlog."""
