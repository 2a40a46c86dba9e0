"""Domain layer — the measurement algebra and cost aggregates.

This layer depends only on stdlib and :mod:`measurectl.diagnostics`.
It must never import from services, infrastructure, commands, or config.
"""
