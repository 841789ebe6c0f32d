"""Services that assemble and inspect data source chains."""
