"""Program tracker test suite."""
