"""Core infrastructure for nextclean: paths, configuration, diagnostics and theme."""
