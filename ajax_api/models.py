"""Minimal models with field rules and associated validation.

They report errors in the mixed shape the AJAX helpers reshape: the primary
model's fields at the top level, each failing association nested under its
name.
"""

import re
from typing import Any, Callable, Dict, List, Mapping, Tuple

Rule = Tuple[Callable[[Any], bool], str]

_EMAIL = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s]+$')


def not_blank(value):
    return value is not None and str(value).strip() != ''


def is_email(value):
    return value in (None, '') or bool(_EMAIL.match(str(value)))


def max_length(limit):
    def rule(value):
        return value is None or len(str(value)) <= limit
    return rule


class Model:
    """A record type validated by per-field rules."""

    alias = None
    rules: Dict[str, List[Rule]] = {}

    def __init__(self, alias=None, associations=None):
        self.alias = alias or self.alias or type(self).__name__
        self.associations: Dict[str, 'Model'] = {}
        for model in associations or ():
            self.associations[model.alias] = model
        self.validation_errors: Dict[str, Any] = {}

    def validates(self, record: Mapping[str, Any]) -> Dict[str, List[str]]:
        """Check one record against the rules, returning messages per field."""
        if not isinstance(record, Mapping):
            record = {}
        errors = {}
        for field, rules in self.rules.items():
            value = record.get(field)
            messages = [message for check, message in rules if not check(value)]
            if messages:
                errors[field] = messages
        return errors

    def validate_associated(self, data: Mapping[str, Any]) -> bool:
        """Validate the primary record and every associated record in `data`."""
        self.validation_errors = dict(self.validates(data.get(self.alias) or {}))

        for name, model in self.associations.items():
            if name not in data:
                continue
            errors = model.validates(data[name] or {})
            if errors:
                self.validation_errors[name] = errors

        return not self.validation_errors


class Contact(Model):
    rules = {
        'name': [(not_blank, 'Name is required'), (max_length(100), 'Name is too long')],
        'email': [(is_email, 'Email address is invalid')],
    }


class ContactLog(Model):
    rules = {
        'subject': [(not_blank, 'Subject is required')],
        'body': [(max_length(2000), 'Message is too long')],
    }

    def __init__(self, alias=None, associations=None):
        if associations is None:
            associations = [Contact()]
        super().__init__(alias, associations)
