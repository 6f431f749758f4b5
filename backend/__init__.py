"""Program tracker backend: app factory, settings and entry point."""
