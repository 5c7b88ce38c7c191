"""systemd service and timer installation."""
