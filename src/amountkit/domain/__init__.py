"""Domain layer: currencies, amounts, and their errors.

This layer depends only on stdlib and pydantic.
It must never import from config or output.
"""
