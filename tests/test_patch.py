# tests/test_patch.py
from customer_registry.patch import DOCUMENT_ERROR_KEY, apply_patch
from customer_registry.schemas import CustomerForPatchDto, PatchOperation


def projection(name="Linus Torvalds", cpf="73473943096"):
    return CustomerForPatchDto(name=name, cpf=cpf)


def ops(*raw):
    return [PatchOperation.model_validate(o) for o in raw]


def test_replace_sets_only_the_target_field():
    result = apply_patch(ops({"op": "replace", "path": "/cpf", "value": "11111111111"}), projection())

    assert result.ok
    assert result.projection.cpf == "11111111111"
    assert result.projection.name == "Linus Torvalds"


def test_add_behaves_like_replace_on_a_field():
    result = apply_patch(ops({"op": "add", "path": "/name", "value": "Linus"}), projection())
    assert result.ok
    assert result.projection.name == "Linus"


def test_path_segments_match_case_insensitively():
    result = apply_patch(ops({"op": "replace", "path": "/Name", "value": "Linus"}), projection())
    assert result.ok
    assert result.projection.name == "Linus"


def test_operations_apply_in_order():
    result = apply_patch(
        ops(
            {"op": "replace", "path": "/name", "value": "First"},
            {"op": "replace", "path": "/name", "value": "Second"},
        ),
        projection(),
    )
    assert result.projection.name == "Second"


def test_remove_required_field_fails_validation():
    result = apply_patch(ops({"op": "remove", "path": "/name"}), projection())

    assert not result.ok
    assert result.projection is None
    assert list(result.errors) == ["name"]


def test_copy_and_test_operations():
    result = apply_patch(
        ops(
            {"op": "test", "path": "/cpf", "value": "73473943096"},
            {"op": "copy", "from": "/cpf", "path": "/name"},
        ),
        projection(),
    )
    assert result.ok
    assert result.projection.name == "73473943096"


def test_move_clears_the_source():
    result = apply_patch(ops({"op": "move", "from": "/cpf", "path": "/name"}), projection())

    assert not result.ok
    assert "cpf" in result.errors


def test_failed_test_operation_stops_the_run():
    result = apply_patch(
        ops(
            {"op": "test", "path": "/name", "value": "Someone Else"},
            {"op": "replace", "path": "/cpf", "value": "11111111111"},
        ),
        projection(),
    )
    assert not result.ok
    assert DOCUMENT_ERROR_KEY in result.errors


def test_unknown_path_is_reported():
    result = apply_patch(ops({"op": "replace", "path": "/id", "value": "3"}), projection())

    assert not result.ok
    assert "'id'" in result.errors[DOCUMENT_ERROR_KEY][0]


def test_nested_path_is_reported():
    result = apply_patch(ops({"op": "replace", "path": "/name/first", "value": "3"}), projection())
    assert DOCUMENT_ERROR_KEY in result.errors


def test_non_string_value_is_reported():
    result = apply_patch(ops({"op": "replace", "path": "/name", "value": 42}), projection())

    assert not result.ok
    assert DOCUMENT_ERROR_KEY in result.errors


def test_move_without_from_is_reported():
    result = apply_patch(ops({"op": "move", "path": "/name"}), projection())
    assert DOCUMENT_ERROR_KEY in result.errors


def test_apply_and_validation_errors_accumulate():
    result = apply_patch(
        ops(
            {"op": "replace", "path": "/cpf", "value": "123"},
            {"op": "replace", "path": "/unknown", "value": "x"},
        ),
        projection(),
    )
    assert set(result.errors) == {DOCUMENT_ERROR_KEY, "cpf"}


def test_input_projection_is_never_mutated():
    original = projection()
    apply_patch(ops({"op": "replace", "path": "/name", "value": "Changed"}), original)
    assert original.name == "Linus Torvalds"
