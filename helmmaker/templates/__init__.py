"""Template bodies for generated charts."""
