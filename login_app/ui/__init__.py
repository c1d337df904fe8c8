"""Presentation layer: view models, view controllers and their composition."""
