"""Order use cases."""
