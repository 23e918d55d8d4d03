"""Infrastructure layer: implementations of application ports (clock, directory, store, scoring)."""
