"""Core infrastructure: errors, configuration and the sway IPC client."""
