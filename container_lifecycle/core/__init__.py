"""Core functionality: runtime client, volume policy and lifecycle controller."""
