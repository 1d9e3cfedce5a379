"""L2 use cases — format resolution, loading, and validation."""
