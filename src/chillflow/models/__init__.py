"""Data models for ChillFlow."""
