from typing import Any, Dict, Optional, Union

from .descriptors import FieldType, GridOptions


class ModelField:
    """Declares a field in a model's class body.

    Once the class is passed through `ModelRegistry.model` the declaration is
    registered as a field descriptor. The attribute also works as accessor: it reads
    and writes through the `get`/`set` methods of the underlying record object.

    Example:
        @registry.model(label='Book')
        class Book(BaseObject):
            title = ModelField()
            author = ModelField(type='pointer', link='Author')
    """
    __slots__ = ('name', 'options')

    def __init__(self, type: Union[FieldType, str, None] = None, label: str = None, i18n: str = None,
                 grid_config: Union[GridOptions, Dict[str, bool], None] = None,
                 add_getter_setter: bool = None, link: Union[type, str, None] = None):
        self.name: Optional[str] = None
        self.options = dict(type=type, label=label, i18n=i18n, grid_config=grid_config,
                            add_getter_setter=add_getter_setter, link=link)

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner) -> Any:
        if instance is None:
            return self
        return instance.get(self.name)

    def __set__(self, instance, value):
        instance.set(self.name, value)

    def __repr__(self):
        return f'<ModelField {self.name}>'


def declared_fields(cls) -> Dict[str, ModelField]:
    """Return the `ModelField` declared in the body of `cls`, in declaration order."""
    return {name: attr for name, attr in cls.__dict__.items() if isinstance(attr, ModelField)}
