"""Expansion of pointer fields across the registered models.

A pointer field is replaced by the fields of the model it links to, recursively,
so that a grid can show the columns of a model and of the models it references.
"""
import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from click import style

from .descriptors import Expansion, FieldDescriptor, ModelDescriptor, ResolvedField
from .registry import ModelRegistry, default_registry
from .utils import class_name

log = logging.getLogger('ModelChain')


def _linked_model(field: FieldDescriptor, registry: ModelRegistry) -> Optional[ModelDescriptor]:
    if isinstance(field.link, str):
        return registry.model_by_identifier(field.link)
    return registry.get_model_descriptor(field.link)


def resolve_chained_fields(model: type, visited: Sequence[type] = (),
                           registry: ModelRegistry = None) -> List[ResolvedField]:
    """Resolve the fields of `model` and of the models linked by its pointer fields.

    Pointer fields are expanded depth first. `visited` is the chain of models from the
    top-level call down to the current one: a model already on the chain resolves to
    nothing, so cycles stop, while the same model can still be expanded in sibling
    branches.

    A pointer field is left out of the result when its linked model isn't registered,
    or when the linked model resolves to no field at all (a cycle or a model without
    fields). A pointer field without link is kept as a plain field.

    Args:
        model: The model class whose fields are resolved.
        visited: Models already being resolved along the current path.
        registry: The registry to read, `default_registry` when omitted.

    Returns:
        List[ResolvedField]: The resolved fields, in declaration order.

    Example:
        >>> resolve_chained_fields(Book, registry=registry)
        [ResolvedField(name='title', ...), ResolvedField(name='author', expansion=Expansion(...))]
    """
    registry = default_registry if registry is None else registry
    if any(seen is model for seen in visited):
        return []
    fields = registry.get_field_descriptors(model)
    if not fields:
        return []
    path = (*visited, model)

    resolved = []
    for field in fields:
        if not (field.is_pointer and field.link is not None):
            resolved.append(ResolvedField.from_descriptor(field))
            continue
        entity = _linked_model(field, registry)
        if entity is None:
            log.debug('dropping "%s.%s": %s is not registered', class_name(model), field.name,
                      style(getattr(field.link, '__name__', field.link), fg='red'))
            continue
        chained = resolve_chained_fields(entity.class_reference, path, registry)
        if not chained:
            log.debug('dropping "%s.%s": cycle or empty model %s', class_name(model), field.name,
                      style(entity.identifier, fg='red'))
            continue
        resolved.append(ResolvedField.from_descriptor(field, Expansion(entity=entity, fields=chained)))
    return resolved


def flatten_chained_fields(fields: Iterable[ResolvedField],
                           separator: str = '.') -> Iterator[Tuple[str, ResolvedField]]:
    """Yield `(path, field)` for every leaf of a resolved tree, like `author.name`."""
    for field in fields:
        if field.expansion is None:
            yield field.name, field
            continue
        for path, leaf in flatten_chained_fields(field.expansion.fields, separator):
            yield f'{field.name}{separator}{path}', leaf
