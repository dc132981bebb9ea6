class BaseObject:
    """Record object keeping its values in a dict, like a document store SDK would."""

    def __init__(self, **values):
        self.values = dict(values)

    def get(self, key):
        return self.values.get(key)

    def set(self, key, value):
        self.values[key] = value


class Author(BaseObject):
    pass


class Publisher(BaseObject):
    pass


class Book(BaseObject):
    pass


def make_model(name: str) -> type:
    return type(name, (BaseObject,), {})
