"""Infrastructure layer — reading declaration files from disk."""
