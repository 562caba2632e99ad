"""Shared helpers for embedfile."""
