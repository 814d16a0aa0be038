"""Verb commands."""
