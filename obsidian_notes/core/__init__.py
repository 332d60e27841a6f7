"""Core vault logic: path containment, note I/O, scanning, search and resources."""
