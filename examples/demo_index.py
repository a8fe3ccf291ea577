#!/usr/bin/env python3
"""Demonstration of schema introspection and indexing.

This script shows how to:
1. Introspect a public GraphQL endpoint
2. Build the namespaced index of its members
3. Render individual fields and types

Note: This demo makes a real HTTP request to a public API.
"""

import sys

from gql_introspect.core import (
    build_index,
    introspect,
    render_field,
    render_full_type,
)

DEFAULT_URL = "https://countries.trevorblades.com/graphql"


def main():
    url = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_URL

    print(f"=== Introspecting {url} ===\n")
    schema = introspect(url)
    print(f"   Found {len(schema.types)} types and {len(schema.directives)} directives")

    print("\n1. Every member, by namespace:")
    index = build_index(schema)
    for key in sorted(index):
        print(f"   {key}")

    print("\n2. Query fields:")
    for field in schema.get_queries():
        print(f"   {render_field(field)}")

    print("\n3. Declared types:")
    for full_type in schema.types:
        rendered = render_full_type(full_type)
        if rendered and not full_type.name.startswith("__"):
            print(rendered)
            print()


if __name__ == "__main__":
    main()
