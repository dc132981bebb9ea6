"""Register SQLAlchemy declarative models from their mappers."""
import logging
from typing import Iterable, Tuple, Union

from sqlalchemy import inspect
from sqlalchemy.orm import DeclarativeBase, RelationshipDirection

from .descriptors import FieldType, ModelDescriptor
from .registry import ModelRegistry, default_registry

log = logging.getLogger('ModelChain')

FIELD_TYPES = {
    'biginteger': FieldType.NUMBER,
    'integer': FieldType.NUMBER,
    'smallinteger': FieldType.NUMBER,
    'float': FieldType.NUMBER,
    'double': FieldType.NUMBER,
    'numeric': FieldType.NUMBER,
    'decimal': FieldType.NUMBER,
    'boolean': FieldType.BOOLEAN,
    'string': FieldType.STRING,
    'text': FieldType.STRING,
    'unicode': FieldType.STRING,
    'unicodetext': FieldType.STRING,
    'char': FieldType.STRING,
    'enum': FieldType.STRING,
    'uuid': FieldType.STRING,
    'date': FieldType.DATE,
    'datetime': FieldType.DATE,
    'timestamp': FieldType.DATE,
    'json': FieldType.OBJECT,
    'array': FieldType.ARRAY,
}


def to_field_type(column_type) -> Union[FieldType, str]:
    """Transform a SQLAlchemy type into a field type tag.

    SQL standard types like `VARCHAR` take the tag of their generic base (`String`);
    unknown types keep their lower-cased class name as extension tag.
    """
    sa_type = column_type if isinstance(column_type, type) else type(column_type)
    for klass in sa_type.__mro__:
        name = klass.__name__.lower()
        if name in FIELD_TYPES:
            return FIELD_TYPES[name]
    return sa_type.__name__.lower()


def all_models(base) -> Tuple[type]:
    return tuple(sorted((mapper.class_ for mapper in base.registry.mappers), key=lambda m: m.__name__))


def register_mapped_model(model: type, registry: ModelRegistry = None, identifier: str = None,
                          label: str = None, i18n: str = None,
                          columns: Iterable[str] = None) -> ModelDescriptor:
    """Register a mapped class, its columns and its many-to-one relationships.

    Columns are registered in mapper order, optionally limited to `columns`; every
    many-to-one relationship becomes a pointer field linked to the related class.
    """
    registry = default_registry if registry is None else registry
    mapper = inspect(model)
    descriptor = registry.register_model(model, identifier=identifier, label=label, i18n=i18n)
    columns = set(columns) if columns else None
    for prop in mapper.column_attrs:
        if columns is not None and prop.key not in columns:
            continue
        column = prop.columns[0]
        registry.register_field(model, prop.key, type=to_field_type(column.type), label=column.doc)
    for prop in mapper.relationships:
        if prop.direction != RelationshipDirection.MANYTOONE:
            continue
        registry.register_field(model, prop.key, type=FieldType.POINTER, label=prop.doc,
                                link=prop.mapper.class_)
    return descriptor


def register_declarative_base(base: type[DeclarativeBase], registry: ModelRegistry = None) -> Tuple[ModelDescriptor]:
    """Register every class mapped on `base`."""
    models = all_models(base)
    log.debug('registering %d mapped models', len(models))
    return tuple(register_mapped_model(model, registry) for model in models)
