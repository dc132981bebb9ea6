from typing import Callable

from orjson import dumps

from .exceptions import ConfigurationError


def class_name(cls: type) -> str:
    """Return the name used as default identifier and label of `cls`."""
    return cls.__name__


class JSONMixin:
    """Dump any descriptor into plain data or JSON."""

    def to_dict(self) -> dict:
        """Transform the descriptor into a JSON-ready dictionary."""
        return self.model_dump(mode='json', by_alias=True)

    def to_json(self) -> bytes:
        """Transform the descriptor into a JSON string."""
        return dumps(self.to_dict())


def _dict_merge(a: dict, b: dict, reduce_func: Callable = None) -> dict:
    sa, sb = map(set, (a, b))
    a_only, b_only = sa - sb, sb - sa
    both = sa.intersection(sb)
    for key in a_only:
        yield key, a[key]
    for key in b_only:
        yield key, b[key]
    for key in both:
        value = a[key]
        if isinstance(value, dict) and isinstance(b[key], dict):
            yield key, dict(_dict_merge(value, b[key], reduce_func))
        elif reduce_func:
            yield key, reduce_func(value, b[key])
        else:
            yield key, value


def dict_merge(a: dict, b: dict, reduce_func: Callable = None) -> dict:
    """Deep merge two dictionaries, values of `a` win over the ones of `b`."""
    return dict(_dict_merge(a, b, reduce_func))


def load_class(class_path: str) -> type:
    """Import `package.module.ClassName` and return the class."""
    full_path = class_path.rsplit('.')
    name = full_path.pop()
    if not full_path:
        raise ConfigurationError(f'"{class_path}" is not a dotted class path')
    try:
        module = __import__('.'.join(full_path), fromlist=[name])
        return getattr(module, name)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f'Cannot load class "{class_path}": {e}') from e


def type_tag(field_type) -> str:
    """Return the plain string tag of a field type."""
    return getattr(field_type, 'value', field_type)
