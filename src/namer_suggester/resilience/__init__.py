"""Error classification for provider diagnostics."""
