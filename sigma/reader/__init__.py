"""Reader: text to S-expressions."""
