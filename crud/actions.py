"""
Bulk actions run from the resource list over a selection of records.
"""
from django.utils.translation import gettext as _

from crud.text import kebab


class Action:
    """
    Base bulk action.

    Subclasses implement handle(queryset) and return the message shown to
    the user once it completes.
    """

    def uri_key(self):
        return kebab(self.__class__.__name__)

    def button_label(self):
        return _(self.__class__.__name__)

    def handle(self, queryset):
        raise NotImplementedError(f"{self.__class__.__name__} must implement handle()")

    def to_dict(self):
        return {'key': self.uri_key(), 'label': self.button_label()}
