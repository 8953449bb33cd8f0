"""Storage adapters (in-memory only) and lookups built on Storage.fetch_all."""
