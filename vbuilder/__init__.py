"""vbuilder - build a Go project and create a systemd service for it."""
