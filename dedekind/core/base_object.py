def _shorten(value, max_len: int=80) -> str:
    text = repr(value)
    if len(text) > max_len:
        text = text[:max_len-3] + '...'
    return text



class BaseObject(object):
    """
    Common base for every value type in `dedekind`. Subclasses list the attributes
    shown by `repr` in `__reprdir__`.
    """

    def __reprdir__(self) -> list:
        return [k for k in self.__dict__ if not k.startswith('_')]


    def __repr__(self) -> str:
        fields = ', '.join(f'{k}={_shorten(getattr(self, k))}' for k in self.__reprdir__())
        return f'<{self.__class__.__name__}: {fields}>'


    def __str__(self) -> str:
        return self.__repr__()


    def __eq__(self, other: object) -> bool:
        return type(self) == type(other) and self.__dict__ == other.__dict__


    def __hash__(self) -> int:
        return hash((self.__class__, tuple(repr(getattr(self, k)) for k in self.__reprdir__())))
