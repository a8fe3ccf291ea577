"""Shared fixtures: introspection payloads built offline with graphql-core."""

import pytest
from graphql import build_schema, get_introspection_query, graphql_sync

from gql_introspect.core.parser import parse_response


def introspect_sdl(sdl: str) -> dict:
    """Run the introspection query against an in-memory schema."""
    result = graphql_sync(build_schema(sdl), get_introspection_query(descriptions=True))
    assert result.errors is None
    return {"data": result.data}


SCENARIO_SDL = """
scalar DateTime

enum Color {
  RED
  GREEN
  BLUE
}

type Query {
  foo: String
  bar: [Int!]
}
"""

SHOP_SDL = '''
"""Point in time"""
scalar DateTime

enum Status {
  ACTIVE
  ARCHIVED @deprecated(reason: "Use ACTIVE")
}

interface Node {
  id: ID!
}

type Product implements Node {
  id: ID!
  name: String!
  tags: [String!]!
  matrix: [[Float!]!]
  createdAt: DateTime
  legacyCode: String @deprecated(reason: "No longer populated")
}

type Review {
  rating: Int!
}

union SearchResult = Product | Review

input ProductFilter {
  status: Status = ACTIVE
  tags: [String!]
}

type Query {
  product(id: ID!): Product
  products(filter: ProductFilter, first: Int = 10): [Product!]!
  search(term: String!): [SearchResult]
}

type Mutation {
  archiveProduct(id: ID!): Product
}

type Subscription {
  productChanged(id: ID!): Product!
}
'''


@pytest.fixture
def scenario_payload():
    """Introspection response for a small schema without mutations."""
    return introspect_sdl(SCENARIO_SDL)


@pytest.fixture
def scenario_schema(scenario_payload):
    return parse_response(scenario_payload)


@pytest.fixture
def shop_payload():
    """Introspection response exercising every type kind and all three roots."""
    return introspect_sdl(SHOP_SDL)


@pytest.fixture
def shop_schema(shop_payload):
    return parse_response(shop_payload)
