"""Metrics interface with tags and a no-op implementation."""