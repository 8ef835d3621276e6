"""HTTP API building blocks shared by the host and its modules."""
