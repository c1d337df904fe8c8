"""Cross-cutting infrastructure: errors, paths, observability."""
