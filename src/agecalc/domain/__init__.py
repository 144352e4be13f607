"""Domain layer — calendar rules, validation, and age arithmetic.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
