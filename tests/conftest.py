import pytest

from model_chain import ModelRegistry, default_registry
from sample_models import make_model


@pytest.fixture
def registry():
    """A registry isolated from the process-wide one."""
    return ModelRegistry()


@pytest.fixture
def clean_default_registry():
    default_registry.clear()
    yield default_registry
    default_registry.clear()


@pytest.fixture
def library(registry):
    """Book -> Author -> Country, Book -> Publisher."""
    Country, Author, Publisher, Book = map(make_model, ('Country', 'Author', 'Publisher', 'Book'))

    registry.register_model(Country)
    registry.register_field(Country, 'name')

    registry.register_model(Author, label='Writer')
    registry.register_field(Author, 'name')
    registry.register_field(Author, 'born', type='date')
    registry.register_field(Author, 'country', type='pointer', link=Country)

    registry.register_model(Publisher)
    registry.register_field(Publisher, 'name')

    registry.register_model(Book)
    registry.register_field(Book, 'title')
    registry.register_field(Book, 'author', type='pointer', link=Author)
    registry.register_field(Book, 'pages', type='number')
    registry.register_field(Book, 'publisher', type='pointer', link=Publisher)
    return Book, Author, Publisher, Country
