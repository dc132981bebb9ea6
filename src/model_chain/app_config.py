import logging
from typing import Any, Dict

from click import style

from .descriptors import GridOptions
from .exceptions import ConfigurationError
from .registry import ModelRegistry
from .utils import dict_merge, load_class

log = logging.getLogger('ModelChain')

default_config = dict(
    grid=dict(
        can_view=True,
        can_read=True,
        can_edit=False,
        can_filter=True,
        can_sort=False,
    ),
    fields=dict(
        type='string',
        add_getter_setter=True,
    ),
    models={},
)

MODEL_OPTIONS = {'identifier', 'label', 'i18n', 'fields'}
FIELD_OPTIONS = {'name', 'type', 'label', 'i18n', 'grid_config', 'add_getter_setter', 'link'}


def _load_link(link):
    """Dotted paths are imported, any other string is a model identifier."""
    if isinstance(link, str) and '.' in link:
        return load_class(link)
    return link


def setup_registry(config: Dict[str, Any] = None, registry: ModelRegistry = None) -> ModelRegistry:
    """Set up a model registry from `config` and return it.

    `config` is merged over `default_config`. Each entry of `models` maps the dotted
    path of a class to its model options and to the list of its fields:

        {'models': {'library.models.Book': {
            'label': 'Book',
            'fields': [{'name': 'title'},
                       {'name': 'author', 'type': 'pointer', 'link': 'library.models.Author'}],
        }}}
    """
    user_config = config or {}
    config = dict_merge(user_config, default_config)
    fields_config = config['fields']
    if registry is None:
        # the user's flags may be camelCase, `merge` maps them to field names
        grid = GridOptions(**default_config['grid']).merge(user_config.get('grid'))
        registry = ModelRegistry(grid_defaults=grid,
                                 default_type=fields_config['type'],
                                 add_getter_setter=fields_config['add_getter_setter'])

    for class_path, options in config['models'].items():
        options = dict(options or {})
        unknown = set(options) - MODEL_OPTIONS
        if unknown:
            raise ConfigurationError(f'Invalid options {sorted(unknown)} for model "{class_path}"')
        cls = load_class(class_path)
        fields = options.pop('fields', ())
        registry.register_model(cls, **options)
        for field in fields:
            field = dict(field)
            unknown = set(field) - FIELD_OPTIONS
            if unknown or 'name' not in field:
                raise ConfigurationError(f'Invalid field {field} for model "{class_path}"')
            if 'link' in field:
                field['link'] = _load_link(field['link'])
            registry.register_field(cls, field.pop('name'), **field)
        log.info('configured model %s', style(class_path, fg='blue'))
    return registry
