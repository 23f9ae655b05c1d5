"""
Resource base class.

A resource describes how one model is managed from the dashboard: its
labels, navigation placement, permission, presentation elements,
validation and lifecycle callbacks. Everything except ``model`` and the
three presentation methods has a default.

    class PostResource(Resource):
        model = Post

        def columns(self):
            return [Column('title')]

        def fields(self):
            return [Field('title', required=True)]

        def legend(self):
            return [Sight('title')]
"""
from django.utils.translation import gettext as _

from core.base.models import SoftDeleteMixin
from crud.conf import crud_settings
from crud.text import kebab, pluralize, singularize, title_words


class Resource:
    # The model the resource corresponds to.
    model = None

    # Labels and navigation

    def name_without_resource(self):
        return self.__class__.__name__.replace('Resource', '') or 'Resource'

    def label(self):
        """Get the displayable label of the resource."""
        return pluralize(title_words(self.name_without_resource()))

    def singular_label(self):
        """Get the displayable singular label of the resource."""
        return singularize(title_words(self.name_without_resource()))

    def uri_key(self):
        """Get the URI key for the resource."""
        return pluralize(kebab(self.__class__.__name__))

    def navigation_title(self):
        """
        Get the menu group the resource is listed under.

        None uses the default group, a string names a custom group and
        False keeps the resource out of the navigation entirely.
        """
        return None

    def icon(self):
        return crud_settings()['DEFAULT_ICON']

    def sort(self):
        return crud_settings()['DEFAULT_SORT']

    def permission(self):
        """Get the permission slug guarding the resource, or None."""
        return None

    def description(self):
        return None

    def per_page(self):
        """Get the number of models to return per page."""
        return getattr(self.model, 'per_page', None) or crud_settings()['DEFAULT_PER_PAGE']

    def get_model(self):
        """A new, unsaved instance of the underlying model."""
        return self.model()

    # Presentation

    def columns(self):
        raise NotImplementedError(f"{self.__class__.__name__} must implement columns()")

    def fields(self):
        raise NotImplementedError(f"{self.__class__.__name__} must implement fields()")

    def legend(self):
        raise NotImplementedError(f"{self.__class__.__name__} must implement legend()")

    def filters(self):
        return []

    def eager_load(self):
        """Relationships to load alongside the list query."""
        return []

    def actions(self):
        return []

    # Validation

    def rules(self, instance):
        """
        Validators per field name, e.g. {'title': [MaxLengthValidator(40)]}.

        ``instance`` is the model being saved (unsaved on create).
        """
        return {}

    def messages(self):
        """Error messages keyed 'field.code', e.g. {'title.required': '...'}."""
        return {}

    def attributes(self):
        """Display names of fields used in error messages."""
        return {}

    # Behaviour flags

    def traffic_cop(self):
        """Check for modifications between viewing and updating a resource."""
        return False

    def soft_deletes(self):
        return self.model is not None and issubclass(self.model, SoftDeleteMixin)

    # Lifecycle

    def on_save(self, data, instance):
        """
        Assign the validated data and persist (create or update).

        Many-to-many values are set through the related manager once the
        instance has a primary key.
        """
        many_to_many = {field.name for field in instance._meta.many_to_many}
        related = {}
        for name, value in data.items():
            if name in many_to_many:
                related[name] = value
            else:
                setattr(instance, name, value)
        instance.save()

        for name, value in related.items():
            getattr(instance, name).set(value)

    def on_delete(self, instance):
        instance.delete()

    def on_restore(self, instance):
        instance.restore()

    def on_force_delete(self, instance):
        # Bypasses the soft delete
        instance.force_delete()

    # Messages

    def actions_dropdown_label(self):
        return _('Actions')

    def create_button_label(self):
        return _('Create %(resource)s') % {'resource': self.singular_label()}

    def create_toast_message(self):
        return _('The %(resource)s was created!') % {'resource': self.singular_label()}

    def update_button_label(self):
        return _('Update %(resource)s') % {'resource': self.singular_label()}

    def update_toast_message(self):
        return _('The %(resource)s was updated!') % {'resource': self.singular_label()}

    def delete_button_label(self):
        return _('Delete %(resource)s') % {'resource': self.singular_label()}

    def delete_toast_message(self):
        return _('The %(resource)s was deleted!') % {'resource': self.singular_label()}

    def save_button_label(self):
        return _('Save %(resource)s') % {'resource': self.singular_label()}

    def restore_button_label(self):
        return _('Restore %(resource)s') % {'resource': self.singular_label()}

    def restore_toast_message(self):
        return _('The %(resource)s was restored!') % {'resource': self.singular_label()}

    def force_delete_button_label(self):
        return _('Force Delete %(resource)s') % {'resource': self.singular_label()}

    def force_delete_toast_message(self):
        return _('The %(resource)s was permanently deleted!') % {'resource': self.singular_label()}

    def traffic_cop_message(self):
        return _(
            'Since the %(resource)s was edited, its values have changed. '
            'Refresh the page to see them or click "%(button)s" again to replace them.'
        ) % {
            'resource': self.singular_label(),
            'button': self.update_button_label(),
        }

    def list_breadcrumbs_message(self):
        return self.label()

    def list_screen_actions_label(self):
        return _('Actions')

    def list_screen_actions_view_label(self):
        return _('View')

    def list_screen_actions_edit_label(self):
        return _('Edit')

    def create_breadcrumbs_message(self):
        return _('New %(resource)s') % {'resource': self.singular_label()}

    def edit_breadcrumbs_message(self):
        return _('Edit %(resource)s') % {'resource': self.singular_label()}

    def view_screen_edit_button_label(self):
        return _('Edit')

    def empty_resource_for_action(self):
        return _('No "%(resources)s" over which you can perform an action') % {'resources': self.label()}

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.uri_key()}>"
