import logging
from typing import Callable, Dict, List, Optional, Union

from click import style

from .descriptors import FieldDescriptor, FieldType, GridOptions, ModelDescriptor
from .exceptions import ModelNotFound
from .fields import declared_fields
from .utils import class_name, type_tag

log = logging.getLogger('ModelChain')


class ModelRegistry:
    """Catalog of the registered models and of the fields declared on them.

    Registration is meant to happen once, while the model modules are imported;
    afterwards the registry is only read.
    """

    def __init__(self, grid_defaults: Union[GridOptions, dict, None] = None,
                 default_type: Union[FieldType, str] = FieldType.STRING,
                 add_getter_setter: bool = True):
        self.grid_defaults = GridOptions().merge(grid_defaults)
        self.default_type = default_type
        self.add_getter_setter = add_getter_setter
        self.clear()

    def clear(self):
        """Forget every registered model and field."""
        self.identifiers: Dict[str, ModelDescriptor] = {}
        self.classes: Dict[type, ModelDescriptor] = {}
        self.fields: Dict[type, List[FieldDescriptor]] = {}

    def register_model(self, cls: type, identifier: str = None, label: str = None,
                       i18n: str = None) -> ModelDescriptor:
        """Register `cls` as model; a previous model with the same identifier is replaced."""
        name = class_name(cls)
        descriptor = ModelDescriptor(
            class_reference=cls,
            identifier=name if identifier is None else identifier,
            label=name if label is None else label,
            i18n=name if i18n is None else i18n,
        )
        previous = self.identifiers.get(descriptor.identifier)
        if previous and previous.class_reference is not cls:
            log.info('model "%s" replaces %s', style(descriptor.identifier, fg='blue'),
                     class_name(previous.class_reference))
        log.debug('registering model "%s"', descriptor.identifier)
        self.identifiers[descriptor.identifier] = descriptor
        self.classes[cls] = descriptor
        return descriptor

    def register_field(self, cls: type, key: str, type: Union[FieldType, str] = None,
                       label: str = None, i18n: str = None,
                       grid_config: Union[GridOptions, dict, None] = None,
                       add_getter_setter: bool = None,
                       link: Union[type, str, None] = None) -> FieldDescriptor:
        """Append a field to the ones of `cls`. Registering the same key twice keeps both."""
        descriptor = FieldDescriptor(
            name=key,
            type=self.default_type if type is None else type,
            label=key if label is None else label,
            i18n=key if i18n is None else i18n,
            grid_config=self.grid_defaults.merge(grid_config),
            add_getter_setter=self.add_getter_setter if add_getter_setter is None else add_getter_setter,
            link=link,
        )
        log.debug('registering field "%s.%s" (%s)', class_name(cls), key, style(type_tag(descriptor.type), fg='yellow'))
        self.fields.setdefault(cls, []).append(descriptor)
        return descriptor

    def get_model_descriptor(self, cls: type) -> Optional[ModelDescriptor]:
        return self.classes.get(cls)

    def get_field_descriptors(self, cls: type) -> List[FieldDescriptor]:
        """Return the fields of `cls` in registration order."""
        return list(self.fields.get(cls, ()))

    def model_by_identifier(self, identifier: str) -> Optional[ModelDescriptor]:
        return self.identifiers.get(identifier)

    @property
    def models(self) -> List[ModelDescriptor]:
        """Return all registered models."""
        return list(self.identifiers.values())

    def resolve(self, cls: type):
        """Resolve the fields of `cls` and of its linked models."""
        from .resolver import resolve_chained_fields
        return resolve_chained_fields(cls, registry=self)

    def model(self, identifier: Union[str, type] = None, label: str = None,
              i18n: str = None) -> Union[type, Callable[[type], type]]:
        """Register the decorated class and the `ModelField` declared in its body."""
        def wrapper(cls):
            self.register_model(cls, identifier=identifier, label=label, i18n=i18n)
            for name, declared in declared_fields(cls).items():
                descriptor = self.register_field(cls, name, **declared.options)
                if not descriptor.add_getter_setter:
                    delattr(cls, name)
            return cls
        if isinstance(identifier, type):
            cls, identifier = identifier, None
            return wrapper(cls)
        return wrapper

    def __getitem__(self, item: Union[str, type]) -> ModelDescriptor:
        """Return the model registered with the identifier or the class `item`."""
        descriptor = self.identifiers.get(item) if isinstance(item, str) else self.classes.get(item)
        if descriptor is None:
            raise ModelNotFound(f'Model "{item}" not found')
        return descriptor

    def __contains__(self, item):
        """Check if `item` is a registered identifier or model class."""
        return item in self.identifiers or item in self.classes

    def __len__(self):
        return len(self.identifiers)

    def __repr__(self):
        return f'<ModelRegistry {", ".join(self.identifiers)}>'


default_registry = ModelRegistry()


def register_model(cls: type, **options) -> ModelDescriptor:
    """Register `cls` on the process-wide registry."""
    return default_registry.register_model(cls, **options)


def register_field(cls: type, key: str, **options) -> FieldDescriptor:
    """Register a field of `cls` on the process-wide registry."""
    return default_registry.register_field(cls, key, **options)


model = default_registry.model
