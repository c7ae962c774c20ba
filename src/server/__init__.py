"""HTTP server for canvas2kanban."""
