"""Unit tests for the user store and its database helpers."""
