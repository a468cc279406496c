"""Validation layer.

Rule tables are plain WTForms forms filled from a decoded JSON body with
``data=``, so they run without a request or a database. ``validate`` runs
every field's chain and reports all failures at once as an ordered list of
``{field, rule, message}``.
"""

import math

from wtforms import Field, StringField
from wtforms.validators import (DataRequired, Length, AnyOf, NumberRange, Email,
                                ValidationError, StopValidation)

from showroom.errors import ValidationFailed

def strip(value):
    return value.strip() if isinstance(value, str) else value


def lower(value):
    return value.lower() if isinstance(value, str) else value


def none_if_empty(value):
    return None if value == '' else value


class Omittable:
    """Stop the chain when the field is absent or blank, leaving data as None."""

    def __call__(self, form, field):
        if field.data is None or field.data == '':
            field.errors[:] = []
            raise StopValidation()


class SingleLine:
    """Reject CR and LF, for values that end up in mail headers."""

    def __init__(self, message=None):
        self.message = message or 'Must not contain line breaks.'

    def __call__(self, form, field):
        if isinstance(field.data, str) and ('\r' in field.data or '\n' in field.data):
            raise ValidationError(self.message)


class TextField(StringField):
    """String field that rejects non-string JSON values."""

    def process_data(self, value):
        if value is None or isinstance(value, str):
            self.data = value
            return
        self.data = None
        raise ValueError(self.gettext('Must be a string.'))


class NumberField(Field):
    """Accepts finite JSON numbers and numeric strings, never booleans."""

    def process_data(self, value):
        self.data = None
        if value is None or value == '':
            return
        if isinstance(value, bool):
            raise ValueError(self.gettext('Must be a number.'))
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            raise ValueError(self.gettext('Must be a number.'))
        if not math.isfinite(number):
            raise ValueError(self.gettext('Must be a number.'))
        self.data = number


class FlagField(Field):
    """JSON boolean."""

    def process_data(self, value):
        if value is None:
            self.data = self.default
            return
        if not isinstance(value, bool):
            self.data = self.default
            raise ValueError(self.gettext('Must be true or false.'))
        self.data = value


class StringListField(Field):
    """Ordered list of strings. Items are trimmed, blank items dropped."""

    def process_data(self, value):
        self.data = []
        if value is None:
            return
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ValueError(self.gettext('Must be a list of strings.'))
        self.data = [item.strip() for item in value if item.strip()]


class ImageListField(Field):
    """Ordered list of ``{url, alt}`` objects."""

    def process_data(self, value):
        self.data = []
        if value is None:
            return
        message = self.gettext('Must be a list of {url, alt} objects.')
        if not isinstance(value, list):
            raise ValueError(message)
        images = []
        for item in value:
            if not isinstance(item, dict):
                raise ValueError(message)
            url, alt = item.get('url'), item.get('alt')
            if not isinstance(url, str) or not url.strip():
                raise ValueError(message)
            if alt is not None and not isinstance(alt, str):
                raise ValueError(message)
            images.append({'url': url.strip(), 'alt': (alt or '').strip()})
        self.data = images


class MappingField(Field):
    """Object with a fixed set of optional string keys. Unknown keys are dropped."""

    def __init__(self, label=None, validators=None, keys=(), **kwargs):
        super().__init__(label, validators, **kwargs)
        self.keys = tuple(keys)

    def process_data(self, value):
        self.data = {}
        if value is None:
            return
        if not isinstance(value, dict):
            raise ValueError(self.gettext('Must be an object.'))
        data = {}
        for key in self.keys:
            item = value.get(key)
            if item is None:
                continue
            if not isinstance(item, str):
                raise ValueError(self.gettext('Values must be strings.'))
            data[key] = item.strip()
        self.data = data


RULE_NAMES = {
    DataRequired: 'required',
    Length: 'length',
    AnyOf: 'enum',
    NumberRange: 'range',
    Email: 'email',
    SingleLine: 'format',
}


def _rule(validator):
    for cls, name in RULE_NAMES.items():
        if isinstance(validator, cls):
            return name
    return type(validator).__name__.lower()


def _error(field, rule, message):
    return {'field': field, 'rule': rule, 'message': message}


def collect_errors(form):
    """Run each field's validator chain and return every failure in field order."""
    errors = []
    for field in form:
        field.errors = []
        if field.process_errors:
            field.errors.extend(field.process_errors)
            errors.extend(_error(field.name, 'type', message) for message in field.process_errors)
            continue
        for validator in field.validators:
            try:
                validator(form, field)
            except StopValidation as exc:
                if exc.args and exc.args[0]:
                    field.errors.append(exc.args[0])
                    errors.append(_error(field.name, _rule(validator), exc.args[0]))
                break
            except ValidationError as exc:
                field.errors.append(exc.args[0])
                errors.append(_error(field.name, _rule(validator), exc.args[0]))
    return errors


def validate(form_class, payload):
    """Return the normalized payload or raise ValidationFailed with every violation."""
    if not isinstance(payload, dict):
        raise ValidationFailed([_error('body', 'type', 'Request body must be a JSON object.')])
    form = form_class(data=payload)
    errors = collect_errors(form)
    if errors:
        raise ValidationFailed(errors)
    return form.data
