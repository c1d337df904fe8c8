"""Screens of the login app, one package per view (view model + view controller)."""
