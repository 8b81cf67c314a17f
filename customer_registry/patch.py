"""
Apply JSON Patch documents to a CustomerForPatchDto projection.

Only ``/name`` and ``/cpf`` are addressable. Operations run in order against a
staging copy of the projection; the first operation that cannot be applied
stops the run. The staged result is then validated against the
CustomerForPatchDto field constraints, so the caller gets either a fully valid
projection or every error collected along the way, never a half-applied one.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from pydantic import ValidationError

from customer_registry.schemas.customer import CustomerForPatchDto
from customer_registry.schemas.patch import PatchOperation
from customer_registry.utils.problems import ErrorMap, add_error, validation_errors

PATCHABLE_FIELDS = ("name", "cpf")

# Key used for errors raised while applying operations (as opposed to field validation)
DOCUMENT_ERROR_KEY = CustomerForPatchDto.__name__


class PatchApplyError(Exception):
    pass


@dataclass
class PatchResult:
    projection: Optional[CustomerForPatchDto] = None
    errors: ErrorMap = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def resolve_path(path: str) -> str:
    """Map a JSON pointer onto one of the patchable field names."""
    segments = path.split("/")
    if len(segments) != 2 or segments[0] != "":
        raise PatchApplyError(f"The path '{path}' is not a valid path for this document.")
    segment = segments[1].replace("~1", "/").replace("~0", "~")
    name = segment.lower()
    if name not in PATCHABLE_FIELDS:
        raise PatchApplyError(f"The target location specified by path segment '{segment}' was not found.")
    return name


def _check_value(value: Any) -> Any:
    if value is not None and not isinstance(value, str):
        raise PatchApplyError(f"The value '{value}' is invalid for target location.")
    return value


def apply_operation(state: Dict[str, Any], operation: PatchOperation) -> None:
    target = resolve_path(operation.path)
    op = operation.op

    if op in ("add", "replace"):
        state[target] = _check_value(operation.value)
    elif op == "remove":
        state[target] = None
    elif op in ("move", "copy"):
        if operation.from_ is None:
            raise PatchApplyError(f"The 'from' location is required for '{op}' operations.")
        source = resolve_path(operation.from_)
        value = state[source]
        if op == "move":
            state[source] = None
        state[target] = value
    else:  # test
        expected = _check_value(operation.value)
        if state[target] != expected:
            raise PatchApplyError(
                f"The current value '{state[target]}' at path '{target}' "
                f"is not equal to the test value '{expected}'."
            )


def apply_patch(operations: Sequence[PatchOperation], projection: CustomerForPatchDto) -> PatchResult:
    state = {name: getattr(projection, name) for name in PATCHABLE_FIELDS}
    errors: ErrorMap = {}

    for operation in operations:
        try:
            apply_operation(state, operation)
        except PatchApplyError as exc:
            add_error(errors, DOCUMENT_ERROR_KEY, str(exc))
            break

    try:
        patched = CustomerForPatchDto.model_validate(state)
    except ValidationError as exc:
        for key, messages in validation_errors(exc, default_key=DOCUMENT_ERROR_KEY).items():
            for message in messages:
                add_error(errors, key, message)
        return PatchResult(errors=errors)

    if errors:
        return PatchResult(errors=errors)
    return PatchResult(projection=patched)
