"""L1 entities — configuration schema, formats, and errors."""
