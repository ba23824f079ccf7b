"""WebFitness API backend: settings, app factory and entry point."""
