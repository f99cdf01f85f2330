"""Shared schema fixtures."""

import copy
import json

import pytest


def _named(kind, name):
    return {"kind": kind, "name": name, "ofType": None}


def _non_null(of_type):
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def _list(of_type):
    return {"kind": "LIST", "name": None, "ofType": of_type}


def _object(name, fields, description=None, kind="OBJECT"):
    return {
        "kind": kind,
        "name": name,
        "description": description,
        "fields": [{"name": n, "args": [], "type": t} for n, t in fields],
        "inputFields": None,
        "interfaces": [],
        "enumValues": None,
        "possibleTypes": None,
    }


_INTROSPECTION = {
    "data": {
        "__schema": {
            "queryType": {"name": "Query"},
            "mutationType": None,
            "subscriptionType": None,
            "types": [
                _object("Query", [
                    ("user", _named("OBJECT", "User")),
                    ("search", _non_null(_list(_named("UNION", "SearchResult")))),
                ]),
                _object("User", [
                    ("id", _non_null(_named("SCALAR", "ID"))),
                    ("name", _named("SCALAR", "String")),
                    ("role", _named("ENUM", "Role")),
                    ("createdAt", _non_null(_named("SCALAR", "DateTime"))),
                ], description="A registered user"),
                {
                    "kind": "ENUM",
                    "name": "Role",
                    "description": "User roles",
                    "fields": None,
                    "inputFields": None,
                    "interfaces": None,
                    "enumValues": [
                        {"name": "ADMIN", "description": None, "isDeprecated": False},
                        {"name": "MEMBER", "description": None, "isDeprecated": False},
                    ],
                    "possibleTypes": None,
                },
                {
                    "kind": "UNION",
                    "name": "SearchResult",
                    "description": None,
                    "fields": None,
                    "inputFields": None,
                    "interfaces": None,
                    "enumValues": None,
                    "possibleTypes": [_named("OBJECT", "User"), _named("OBJECT", "Post")],
                },
                _object("Post", [
                    ("title", _non_null(_named("SCALAR", "String"))),
                ]),
                {
                    "kind": "INTERFACE",
                    "name": "Node",
                    "description": "",
                    "fields": [{"name": "id", "args": [], "type": _non_null(_named("SCALAR", "ID"))}],
                    "inputFields": None,
                    "interfaces": [],
                    "enumValues": None,
                    "possibleTypes": [_named("OBJECT", "User"), _named("OBJECT", "Post")],
                },
                {
                    "kind": "INPUT_OBJECT",
                    "name": "UserFilter",
                    "description": None,
                    "fields": None,
                    "inputFields": [
                        {"name": "role", "type": _named("ENUM", "Role"), "defaultValue": None},
                        {"name": "ids", "type": _list(_non_null(_named("SCALAR", "ID"))), "defaultValue": None},
                    ],
                    "interfaces": None,
                    "enumValues": None,
                    "possibleTypes": None,
                },
                _named("SCALAR", "String") | {"description": None},
                _named("SCALAR", "ID") | {"description": None},
                _named("SCALAR", "DateTime") | {"description": "ISO 8601 timestamp"},
                _named("SCALAR", "Boolean") | {"description": None},
                _object("__Schema", [
                    ("description", _named("SCALAR", "String")),
                ]),
            ],
        }
    }
}

_EXPECTED_MODULE = """\
// @flow
// graphql flow definitions: GQL
type GraphQLResponseRoot = {
  data?: Query;
  errors?: Array<GraphQLResponseError>;
}

type GraphQLResponseError = {
  message: string;
  locations?: Array<GraphQLResponseErrorLocation>;
  [propName: string]: any;
}

type GraphQLResponseErrorLocation = {
  line: number;
  column: number;
}

type Query = {
  __typename: string;
  search: Array<SearchResult>;
  user?: User;
}

/*
  description: A registered user
*/
type User = {
  __typename: string;
  createdAt: any;
  id: string;
  name?: string;
  role?: RoleEnum;
}

/*
  description: User roles
*/
type RoleEnum = "ADMIN" | "MEMBER";

type SearchResult = User | Post;

type Post = {
  __typename: string;
  title: string;
}

type Node = User | Post;

type UserFilter = {
  ids?: Array<string>;
  role?: RoleEnum;
}
"""


@pytest.fixture
def introspection_document():
    """An introspection response as returned by a GraphQL server."""
    return copy.deepcopy(_INTROSPECTION)


@pytest.fixture
def expected_module():
    """Module generated from introspection_document with default options."""
    return _EXPECTED_MODULE


@pytest.fixture
def schema_json(tmp_path, introspection_document):
    """introspection_document written to a .json file."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(introspection_document))
    return path
