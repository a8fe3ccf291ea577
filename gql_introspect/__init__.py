"""Introspect GraphQL endpoints and render what their schemas expose."""
