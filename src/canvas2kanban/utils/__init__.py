"""Shared utilities for canvas2kanban."""
