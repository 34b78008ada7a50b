"""Pytest configuration and shared fixtures for graphql-codegen tests."""

from __future__ import annotations

import pytest

from graphql_codegen.codegen.core.config import GeneratorConfig, load_config
from graphql_codegen.codegen.core.schema import parse_schema
from graphql_codegen.codegen.languages.go import GoGenerator

BLOG_SCHEMA = '''
"""A blog post."""
type Post implements Node {
  id: ID!
  tags: [String!]
  title: String
  author: User!
  related: [Post]!
  legacyUrl: String @deprecated(reason: "Use url")
}

type User implements Node {
  id: ID!
  name: String!
  posts: [Post!]!
}

interface Node {
  id: ID!
}

enum Status {
  DRAFT
  PUBLISHED
}

input PostFilter {
  tag: String
}

union SearchResult = Post | User

scalar Time

type Query {
  post(id: ID!): Post
  search(filter: PostFilter): [SearchResult!]!
  status: Status
  now: Time
}
'''

POST_SCHEMA = """
type Post {
  id: ID!
  tags: [String!]
}
"""


@pytest.fixture
def blog_schema_text() -> str:
    return BLOG_SCHEMA


@pytest.fixture
def blog_schema():
    return parse_schema(BLOG_SCHEMA)


@pytest.fixture
def post_schema():
    return parse_schema(POST_SCHEMA)


@pytest.fixture
def default_config() -> GeneratorConfig:
    return load_config("go")


@pytest.fixture
def generator(default_config) -> GoGenerator:
    return GoGenerator(default_config)


@pytest.fixture
def make_generator():
    """Build a GoGenerator from configuration overrides."""

    def _make(**overrides) -> GoGenerator:
        return GoGenerator(load_config("go", custom_config=overrides))

    return _make
