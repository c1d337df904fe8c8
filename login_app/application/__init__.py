"""Application layer.

This layer contains *use cases* (application services) that orchestrate
repositories/services to fulfill a user intent, plus the composition root.

Rule of thumb:
UI -> application.use_cases -> repositories -> services
"""
