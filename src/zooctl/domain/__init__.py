"""Domain layer — species, roles, ledger and feeding/cleaning rules.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
