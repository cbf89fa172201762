"""pytest integration: fixture provider, run reporter, sharding, preflight."""
