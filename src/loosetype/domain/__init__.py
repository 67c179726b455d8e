"""Value model shared by the colour, sanitizer and cast namespaces."""
