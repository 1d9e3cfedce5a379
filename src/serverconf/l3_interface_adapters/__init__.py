"""L3 interface adapters."""
