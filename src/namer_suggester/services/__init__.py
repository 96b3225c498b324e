"""Session services built on top of the suggestion core."""
