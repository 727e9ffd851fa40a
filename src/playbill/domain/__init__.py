"""Domain layer — plays, invoices, pricing rules, and statement data.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
