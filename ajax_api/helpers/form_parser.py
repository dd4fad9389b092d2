"""Decode serialized forms (jQuery's `$(form).serialize()`) into nested data.

Bracketed keys nest the way PHP and Rails read them:

    data[Contact][name]=Ann&data[Contact][tags][]=a&data[Contact][tags][]=b

becomes

    {'data': {'Contact': {'name': 'Ann', 'tags': ['a', 'b']}}}
"""

import logging
import re
from urllib.parse import parse_qsl, urlencode

from ajax_api.exceptions import FormDataMissing, FormMethodNotAllowed

logger = logging.getLogger('ajax_api')

_SEGMENT = re.compile(r'\[([^\[\]]*)\]')
_DECIMAL = re.compile(r'[0-9]+')


def _split_key(name):
    """Split `a[b][]` into ['a', 'b', '']. Malformed brackets keep the name literal."""
    start = name.find('[')
    if start <= 0:
        return [name]

    segments = [name[:start]]
    pos = start
    while pos < len(name):
        match = _SEGMENT.match(name, pos)
        if not match:
            break
        segments.append(match.group(1))
        pos = match.end()

    if len(segments) == 1:
        return [name]
    return segments


def _is_decimal(key):
    return isinstance(key, str) and _DECIMAL.fullmatch(key) is not None


def _is_list_index(key, items):
    return _is_decimal(key) and str(int(key)) == key and int(key) <= len(items)


def _next_index(mapping):
    indexes = [int(k) for k in mapping if _is_decimal(k)]
    return str(max(indexes) + 1) if indexes else '0'


def _lookup(container, key):
    if isinstance(container, list):
        if key and _is_list_index(key, container) and int(key) < len(container):
            return container[int(key)]
        return None
    return container.get(key)


def _store(container, key, value):
    if isinstance(container, list):
        if key == '' or int(key) == len(container):
            container.append(value)
        else:
            container[int(key)] = value
        return
    if key == '':
        key = _next_index(container)
    container[key] = value


def _assign(root, segments, value):
    parent, key = root, segments[0]
    for segment in segments[1:]:
        child = _lookup(parent, key)
        if not isinstance(child, (dict, list)):
            child = [] if segment in ('', '0') else {}
        elif isinstance(child, list) and segment != '' and not _is_list_index(segment, child):
            # A named key turns the list into a mapping
            child = {str(i): item for i, item in enumerate(child)}
        _store(parent, key, child)
        parent, key = child, segment
    _store(parent, key, value)


def decode_form(raw_form):
    """Decode an url-encoded string into a nested dict."""
    form = {}
    if not raw_form:
        return form

    for name, value in parse_qsl(raw_form, keep_blank_values=True):
        if not name:
            continue
        _assign(form, _split_key(name), value)
    return form


def _flatten(value, prefix):
    if isinstance(value, dict):
        for key, item in value.items():
            if '[' in str(key) or ']' in str(key):
                raise ValueError(f"Form key {key!r} cannot contain brackets")
            yield from _flatten(item, f"{prefix}[{key}]" if prefix else str(key))
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            if isinstance(item, (dict, list, tuple)):
                yield from _flatten(item, f"{prefix}[{index}]")
            else:
                yield from _flatten(item, f"{prefix}[]")
    else:
        yield prefix, '' if value is None else str(value)


def encode_form(data):
    """Serialize a nested mapping the way a browser form would post it.

    Keys containing brackets cannot be told apart from nesting and raise
    ValueError.
    """
    return urlencode(list(_flatten(data, '')))


def parse_form(raw_form, method=None, token_field='_Token'):
    """Decode a serialized form and return its `data` entry.

    When `method` is given the form's `_method` field must equal it exactly.
    The anti-forgery token under `data` is dropped.
    """
    form = decode_form(raw_form)

    if method:
        found = form.get('_method')
        if found != method:
            logger.warning(f"Form method {found} rejected, expected {method}")
            raise FormMethodNotAllowed(found, method)

    data = form.get('data')
    if isinstance(data, list):
        # Indexed entries, keep them addressable by position
        data = {str(index): item for index, item in enumerate(data)}
    if not isinstance(data, dict):
        raise FormDataMissing('data')

    data.pop(token_field, None)
    return data
