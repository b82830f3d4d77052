"""Commerce platform read interfaces and their in-memory implementations."""
