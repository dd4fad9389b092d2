"""Error kinds raised by the AJAX helpers.

The HTTP errors subclass Werkzeug's exceptions so Flask answers them with the
right status when nothing else handles them.
"""

from werkzeug.exceptions import BadRequest, MethodNotAllowed


class RequestTypeNotAllowed(BadRequest):
    """The current request does not declare the expected kind."""

    def __init__(self, expected):
        self.expected = expected
        super().__init__(f"Only {expected} calls are allowed")


class FormMethodNotAllowed(MethodNotAllowed):
    """The `_method` field of a serialized form is not the required one."""

    def __init__(self, method, required=None):
        self.method = method
        self.required = required
        valid_methods = [required] if required else None
        super().__init__(
            valid_methods=valid_methods,
            description=f"The form method {method} is not allowed",
        )


class FormDataMissing(BadRequest):
    """The decoded form has no top-level `data` mapping."""

    def __init__(self, key="data"):
        self.key = key
        super().__init__(f"The form does not contain a '{key}' entry")


class InvalidErrorShape(TypeError):
    """A validation error entry is neither a message list nor a mapping."""

    def __init__(self, key, value):
        self.key = key
        self.value = value
        super().__init__(
            f"Validation errors for '{key}' must be messages or a mapping, "
            f"got {type(value).__name__}"
        )
