"""HTTP analyze service for the concatenation filter.

WHY: Index tooling and other services want to preview what a filter
configuration does to a piece of text without embedding this package.

HOW: app.py defines the FastAPI application, models.py its pydantic
request and response schemas.
"""
