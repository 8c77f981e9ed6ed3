"""API explorer backend packages."""
