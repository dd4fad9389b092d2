"""Reshape associated-model validation errors for client-side display.

A model validating itself together with its associations reports errors in a
mixed shape: its own fields next to one nested mapping per association,

    {'name': ['required'], 'Contact': {'email': ['invalid']}}

The browser side wants one entry per model,

    {'ContactLog': {'name': ['required']}, 'Contact': {'email': ['invalid']}}

Which keys are associations is only known from the submitted data, so every
top-level data key found among the errors is taken as a model name. A data
key that happens to equal a field of the primary model is therefore reported
as a model of its own.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from ajax_api.exceptions import InvalidErrorShape
from ajax_api.helpers.aliasing import anti_aliasing

logger = logging.getLogger('ajax_api')


@dataclass(frozen=True)
class FieldErrors:
    """Messages for a single field."""
    messages: List[str]

    def to_plain(self):
        return list(self.messages)


@dataclass(frozen=True)
class NestedErrors:
    """Errors of an associated model, keyed by its fields."""
    fields: Dict[str, Any]

    def to_plain(self):
        return {key: _plain(value) for key, value in self.fields.items()}


ErrorEntry = Union[FieldErrors, NestedErrors]


def _plain(value):
    if isinstance(value, (FieldErrors, NestedErrors)):
        return value.to_plain()
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return list(value)
    return value


def classify_entry(key: str, value: Any) -> ErrorEntry:
    """Tag one raw error entry as field messages or nested model errors."""
    if isinstance(value, (FieldErrors, NestedErrors)):
        return value
    if isinstance(value, str):
        return FieldErrors([value])
    if isinstance(value, (list, tuple)):
        return FieldErrors(list(value))
    if isinstance(value, Mapping):
        return NestedErrors(dict(value))
    raise InvalidErrorShape(key, value)


def classify_errors(raw_errors: Mapping[str, Any]) -> Dict[str, ErrorEntry]:
    return {key: classify_entry(key, value) for key, value in raw_errors.items()}


def reshape_errors(raw_errors: Mapping[str, Any], data_keys, primary: str) -> Dict[str, Any]:
    """Group errors per model name.

    Entries named by `data_keys` are moved out as they are; whatever is left
    belongs to the primary model and is filed under `primary`.
    """
    remaining = classify_errors(raw_errors)
    errors: Dict[str, Any] = {}

    for key in data_keys:
        if key in remaining:
            errors[key] = remaining.pop(key).to_plain()

    if remaining:
        errors[primary] = {key: entry.to_plain() for key, entry in remaining.items()}

    return errors


def validate_associated(model, data: Mapping[str, Any], aliases: Optional[Mapping[str, str]] = None):
    """Validate `data` with `model` and its associations.

    Returns True when valid, otherwise the errors grouped per model name. With
    `aliases` the model names are reported under the names the view used.
    """
    if model.validate_associated(data):
        return True

    errors = reshape_errors(model.validation_errors or {}, list(data.keys()), model.alias)
    logger.debug(f"Validation of {model.alias} failed for {', '.join(errors)}")

    if aliases:
        errors = anti_aliasing(aliases, errors)
    return errors
