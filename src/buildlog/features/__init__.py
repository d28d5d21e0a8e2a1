"""Feature packages for buildlog."""
