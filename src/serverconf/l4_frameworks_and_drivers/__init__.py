"""L4 frameworks and drivers — defaults, wiring, logging."""
