"""PyQt5 frontend."""
