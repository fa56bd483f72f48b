"""Data models for focusrest."""
