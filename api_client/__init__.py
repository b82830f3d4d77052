"""
PayPal REST API client

This package maps commerce orders and carts to PayPal request payloads,
calls the PayPal v2 endpoints and maps the responses back into entities:
- entity: immutable value objects for PayPal resources
- factory: commerce/JSON -> entity mappers
- endpoint: authenticated HTTP calls per REST resource
- authentication: OAuth bearer tokens
"""
