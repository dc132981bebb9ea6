from .descriptors import FieldType, GridOptions, ModelDescriptor, FieldDescriptor, ResolvedField, Expansion
from .exceptions import ModelChainException, ModelNotFound, ConfigurationError
from .fields import ModelField
from .registry import ModelRegistry, default_registry, register_model, register_field, model
from .resolver import resolve_chained_fields, flatten_chained_fields
from .app_config import default_config, setup_registry

__all__ = [
    'FieldType',
    'GridOptions',
    'ModelDescriptor',
    'FieldDescriptor',
    'ResolvedField',
    'Expansion',
    'ModelChainException',
    'ModelNotFound',
    'ConfigurationError',
    'ModelField',
    'ModelRegistry',
    'default_registry',
    'register_model',
    'register_field',
    'model',
    'resolve_chained_fields',
    'flatten_chained_fields',
    'default_config',
    'setup_registry',
]
