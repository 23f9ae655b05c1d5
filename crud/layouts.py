"""
Presentation elements returned by Resource.columns(), fields() and legend().

    Column -> one cell of the list screen
    Field  -> one input of the create/edit form
    Sight  -> one row of the view screen
"""
from django.core.exceptions import ObjectDoesNotExist
from django.utils.translation import gettext as _


def resolve_attribute(instance, path):
    """
    Follow a dotted/double-underscore path ('author.name', 'author__name').

    Returns None when a link in the chain is missing. Callables are called.
    """
    value = instance
    for part in path.replace('__', '.').split('.'):
        if value is None:
            return None
        try:
            value = getattr(value, part)
        except ObjectDoesNotExist:
            return None
        if callable(value) and not hasattr(value, 'all'):
            value = value()
    return value


class Element:
    """Base presentation element: a model attribute with a display title."""

    def __init__(self, name, title=None, render=None):
        self.name = name
        self._title = title
        self.render = render

    @property
    def title(self):
        if self._title is not None:
            return self._title
        return _(self.name.replace('__', ' ').replace('.', ' ').replace('_', ' ').capitalize())

    def value(self, instance):
        if self.render is not None:
            return self.render(instance)
        return resolve_attribute(instance, self.name)

    def to_dict(self):
        return {'name': self.name, 'title': self.title}

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name!r})"


class Column(Element):
    """List screen column."""

    def __init__(self, name, title=None, render=None, sortable=False):
        super().__init__(name, title=title, render=render)
        self.sortable = sortable

    def to_dict(self):
        return {**super().to_dict(), 'sortable': self.sortable}


class Sight(Element):
    """View screen row."""


class Field(Element):
    """
    Create/edit form input.

    ``name`` must be a concrete field of the resource's model; it is what
    the validation serializer accepts and what on_save() assigns.
    """

    def __init__(self, name, title=None, input_type='text', required=False, help_text='', placeholder=''):
        super().__init__(name, title=title)
        self.input_type = input_type
        self.required = required
        self.help_text = help_text
        self.placeholder = placeholder

    def value(self, instance):
        if instance is None:
            return None
        field = instance._meta.get_field(self.name)
        if field.many_to_many:
            if instance.pk is None:
                return []
            return list(getattr(instance, self.name).values_list('pk', flat=True))
        if field.is_relation and field.many_to_one:
            return getattr(instance, field.attname)
        return getattr(instance, self.name)

    def to_dict(self):
        return {
            **super().to_dict(),
            'type': self.input_type,
            'required': self.required,
            'help_text': self.help_text,
            'placeholder': self.placeholder,
        }
