"""Render-time helpers for the Moving Again static site."""
