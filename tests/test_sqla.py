from datetime import date
from typing import List, Optional

import pytest
from sqlalchemy import INTEGER, JSON, TIMESTAMP, VARCHAR, ForeignKey, Numeric, String, Text
from sqlalchemy.types import UserDefinedType
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from model_chain import FieldType, flatten_chained_fields
from model_chain.sqla import register_declarative_base, register_mapped_model, to_field_type


@pytest.fixture
def library_base():
    """Generate a fresh declarative base with a small library schema."""

    class Base(DeclarativeBase):
        pass

    class Author(Base):
        __tablename__ = 'author'

        id: Mapped[int] = mapped_column(primary_key=True)
        name: Mapped[str] = mapped_column(String(150))
        mentor_id: Mapped[Optional[int]] = mapped_column(ForeignKey('author.id'))
        mentor: Mapped[Optional['Author']] = relationship(remote_side=[id])
        books: Mapped[List['Book']] = relationship(back_populates='author')

    class Book(Base):
        __tablename__ = 'book'

        id: Mapped[int] = mapped_column(primary_key=True)
        title: Mapped[str]
        published: Mapped[date]
        price = mapped_column(Numeric(10, 2))
        extra = mapped_column(JSON)
        author_id: Mapped[int] = mapped_column(ForeignKey('author.id'))
        author: Mapped[Author] = relationship(back_populates='books')

    return Base, Author, Book


def test_to_field_type():
    assert to_field_type(String(10)) is FieldType.STRING
    assert to_field_type(Text) is FieldType.STRING
    assert to_field_type(Numeric()) is FieldType.NUMBER
    assert to_field_type(JSON()) is FieldType.OBJECT

    class Code(String):
        pass

    class Point(UserDefinedType):
        cache_ok = True

    assert to_field_type(Code(8)) is FieldType.STRING
    assert to_field_type(Point()) == 'point'


def test_sql_standard_types():
    assert to_field_type(VARCHAR(10)) is FieldType.STRING
    assert to_field_type(INTEGER()) is FieldType.NUMBER
    assert to_field_type(TIMESTAMP()) is FieldType.DATE
    assert to_field_type(TIMESTAMP) is FieldType.DATE


def test_register_mapped_model(registry, library_base):
    Base, Author, Book = library_base
    register_mapped_model(Author, registry, label='Writer')
    register_mapped_model(Book, registry)

    fields = {f.name: f for f in registry.get_field_descriptors(Book)}
    assert list(fields) == ['id', 'title', 'published', 'price', 'extra', 'author_id', 'author']
    assert fields['id'].type == 'number'
    assert fields['title'].type == 'string'
    assert fields['published'].type == 'date'
    assert fields['price'].type == 'number'
    assert fields['extra'].type == 'object'
    assert fields['author'].type == 'pointer'
    assert fields['author'].link is Author
    assert registry['Author'].label == 'Writer'

    # one-to-many relationships are not pointers
    assert 'books' not in {f.name for f in registry.get_field_descriptors(Author)}


def test_resolve_mapped_models(registry, library_base):
    Base, Author, Book = library_base
    register_declarative_base(Base, registry)

    paths = [path for path, _ in flatten_chained_fields(registry.resolve(Book))]
    assert paths == ['id', 'title', 'published', 'price', 'extra', 'author_id',
                     'author.id', 'author.name', 'author.mentor_id']


def test_selected_columns(registry, library_base):
    Base, Author, Book = library_base
    register_mapped_model(Book, registry, columns=('title',))

    assert [f.name for f in registry.get_field_descriptors(Book)] == ['title', 'author']
    # Author isn't registered: the pointer is dropped
    assert [f.name for f in registry.resolve(Book)] == ['title']
