"""Framework-free helpers shared by models, services and repositories."""
