"""In-process fakes of external services."""
