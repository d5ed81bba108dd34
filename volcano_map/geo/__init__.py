"""Dataset ranges and screen projection."""
