"""Product form rules."""

from wtforms import Form
from wtforms.validators import DataRequired, Length, AnyOf, NumberRange

from showroom.models import PRODUCT_CATEGORIES, SPECIFICATION_KEYS
from .base import (TextField, NumberField, FlagField, StringListField, ImageListField,
                   MappingField, Omittable, strip)


class ProductForm(Form):
    """Full product document, used for both create and update."""
    name = TextField('Name', validators=[
        DataRequired(message='Product name is required'),
        Length(min=3, max=100, message='Product name must be between %(min)d and %(max)d characters')
    ], filters=[strip])
    description = TextField('Description', validators=[
        DataRequired(message='Description is required'),
        Length(min=10, max=1000, message='Description must be between %(min)d and %(max)d characters')
    ], filters=[strip])
    category = TextField('Category', validators=[
        DataRequired(message='Category is required'),
        AnyOf(PRODUCT_CATEGORIES, message='Select a valid category: %(values)s')
    ], filters=[strip])
    features = StringListField('Features')
    price = NumberField('Price', validators=[
        Omittable(),
        NumberRange(min=0, message='Price cannot be negative')
    ])
    images = ImageListField('Images')
    isActive = FlagField('Active', default=True)
    specifications = MappingField('Specifications', keys=SPECIFICATION_KEYS)
