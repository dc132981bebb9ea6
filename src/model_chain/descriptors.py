from enum import Enum
from typing import Any, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from .utils import JSONMixin, class_name

POINTER_TYPES = ('pointer', 'Pointer')


class FieldType(str, Enum):
    """Known field type tags. Any other string is accepted as extension type."""
    STRING = 'string'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    ARRAY = 'array'
    OBJECT = 'object'
    DATE = 'date'
    POINTER = 'pointer'


class GridOptions(JSONMixin, BaseModel):
    """Display flags of a field inside a grid."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    can_view: bool = True
    can_read: bool = True
    can_edit: bool = False
    can_filter: bool = True
    can_sort: bool = False

    def merge(self, overrides: Union['GridOptions', dict, None] = None) -> 'GridOptions':
        """Return a copy where every flag named in `overrides` wins, the others are kept."""
        if not overrides:
            return self
        if isinstance(overrides, GridOptions):
            overrides = overrides.model_dump(exclude_unset=True)
        names = {to_camel(name): name for name in type(self).model_fields}
        values = self.model_dump()
        values.update({names.get(key, key): value for key, value in overrides.items()})
        return type(self).model_validate(values)


class ModelDescriptor(JSONMixin, BaseModel):
    """Metadata of a registered model class."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    class_reference: Type[Any]
    identifier: str
    label: str
    i18n: str = Field(alias='i18n')

    @field_serializer('class_reference')
    def _serialize_class(self, cls: type) -> str:
        return class_name(cls)


class FieldDescriptor(JSONMixin, BaseModel):
    """Metadata of a single field declared on a model class."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    name: str
    type: Union[FieldType, str] = Field(default=FieldType.STRING, union_mode='left_to_right')
    label: str
    i18n: str = Field(alias='i18n')
    grid_config: GridOptions = GridOptions()
    add_getter_setter: bool = True
    # class of the linked model, or its registered identifier
    link: Optional[Union[Type[Any], str]] = None

    @property
    def is_pointer(self) -> bool:
        return self.type in POINTER_TYPES

    @field_serializer('link')
    def _serialize_link(self, link):
        if isinstance(link, type):
            return class_name(link)
        return link


class ResolvedField(FieldDescriptor):
    """A field descriptor, with the linked model's fields when it is an expanded pointer."""

    expansion: Optional['Expansion'] = None

    @classmethod
    def from_descriptor(cls, field: FieldDescriptor, expansion: 'Expansion' = None) -> 'ResolvedField':
        return cls(**dict(field), expansion=expansion)


class Expansion(JSONMixin, BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    entity: ModelDescriptor
    fields: List[ResolvedField]


ResolvedField.model_rebuild()
Expansion.model_rebuild()
