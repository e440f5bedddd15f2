"""Document processing, storage and orchestration services."""
