"""Native procedures bound in the root environment."""
