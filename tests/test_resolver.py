"""Tests for type reference resolution."""

import pytest

from gql_flowgen.core.ir import GeneratorOptions, IRTypeRef, TypeKind
from gql_flowgen.core.resolver import (
    MAX_TYPE_DEPTH,
    TypeDepthError,
    enum_name,
    resolve_type_expression,
    type_name,
    unwrap_to_root_type,
)


def named(kind, name):
    return IRTypeRef(kind=kind, name=name)


def list_of(ref):
    return IRTypeRef(kind=TypeKind.LIST, of_type=ref)


def non_null(ref):
    return IRTypeRef(kind=TypeKind.NON_NULL, of_type=ref)


def nested_lists(depth):
    ref = named(TypeKind.SCALAR, "Int")
    for _ in range(depth):
        ref = list_of(ref)
    return ref


@pytest.fixture
def options():
    return GeneratorOptions(post_fix="X")


class TestNaming:
    """Tests for generated type and enum names."""

    def test_type_name_appends_post_fix(self, options):
        assert type_name("User", options) == "UserX"

    def test_enum_name(self, options):
        assert enum_name("Role", options) == "RoleEnumX"

    def test_naming_is_pure(self, options):
        assert type_name("User", options) == type_name("User", options)
        assert enum_name("Role", options) == enum_name("Role", options)

    def test_empty_post_fix(self):
        assert type_name("User", GeneratorOptions()) == "User"


class TestScalars:
    """Tests for built-in scalar mapping."""

    @pytest.mark.parametrize(
        "scalar,expected",
        [
            ("ID", "string"),
            ("String", "string"),
            ("Boolean", "boolean"),
            ("Float", "number"),
            ("Int", "number"),
        ],
    )
    def test_builtin(self, options, scalar, expected):
        assert resolve_type_expression(named(TypeKind.SCALAR, scalar), options) == expected

    def test_custom_scalar_degrades_to_any(self, options):
        assert resolve_type_expression(named(TypeKind.SCALAR, "DateTime"), options) == "any"

    def test_post_fix_not_applied_to_scalars(self, options):
        assert resolve_type_expression(named(TypeKind.SCALAR, "String"), options) == "string"


class TestNamedKinds:
    """Tests for object, interface, union, input and enum references."""

    @pytest.mark.parametrize(
        "kind",
        [TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.UNION, TypeKind.INPUT_OBJECT],
    )
    def test_type_name(self, options, kind):
        assert resolve_type_expression(named(kind, "Thing"), options) == "ThingX"

    def test_enum(self, options):
        assert resolve_type_expression(named(TypeKind.ENUM, "Role"), options) == "RoleEnumX"

    def test_unrecognized_kind_is_plain_name(self, options):
        ref = named(TypeKind.parse("SOMETHING_NEW"), "Thing")
        assert ref.kind is TypeKind.UNRECOGNIZED
        assert resolve_type_expression(ref, options) == "ThingX"

    def test_missing_name_is_any(self, options):
        assert resolve_type_expression(IRTypeRef(kind=TypeKind.OBJECT), options) == "any"


class TestWrappers:
    """Tests for LIST and NON_NULL handling."""

    def test_non_null_is_transparent(self, options):
        ref = non_null(named(TypeKind.SCALAR, "String"))
        assert resolve_type_expression(ref, options) == "string"

    def test_list(self, options):
        ref = list_of(named(TypeKind.OBJECT, "User"))
        assert resolve_type_expression(ref, options) == "Array<UserX>"

    def test_nesting_depth_preserved(self, options):
        ref = list_of(list_of(non_null(named(TypeKind.SCALAR, "Int"))))
        assert resolve_type_expression(ref, options) == "Array<Array<number>>"

    def test_non_null_list_of_non_null(self, options):
        ref = non_null(list_of(non_null(named(TypeKind.ENUM, "Role"))))
        assert resolve_type_expression(ref, options) == "Array<RoleEnumX>"

    def test_list_without_of_type(self, options):
        assert resolve_type_expression(IRTypeRef(kind=TypeKind.LIST), options) == "Array<any>"

    def test_max_depth_allowed(self, options):
        expression = resolve_type_expression(nested_lists(MAX_TYPE_DEPTH), options)
        assert expression.count("Array<") == MAX_TYPE_DEPTH

    def test_runaway_nesting_raises(self, options):
        with pytest.raises(TypeDepthError):
            resolve_type_expression(nested_lists(MAX_TYPE_DEPTH + 5), options)


class TestUnwrap:
    """Tests for unwrap_to_root_type."""

    def test_named_ref_is_its_own_root(self):
        ref = named(TypeKind.OBJECT, "User")
        assert unwrap_to_root_type(ref) is ref

    def test_strips_all_wrappers(self):
        root = named(TypeKind.OBJECT, "User")
        ref = non_null(list_of(non_null(root)))
        assert unwrap_to_root_type(ref) is root

    def test_ref_without_name_or_of_type_is_terminal(self):
        ref = IRTypeRef(kind=TypeKind.LIST)
        assert unwrap_to_root_type(ref) is ref

    def test_runaway_nesting_raises(self):
        with pytest.raises(TypeDepthError):
            unwrap_to_root_type(nested_lists(MAX_TYPE_DEPTH + 5))
