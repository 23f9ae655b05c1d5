"""
Resources used by the test suite and registered in crud_project.settings.
"""
from django.core.validators import MaxLengthValidator
from django.utils.translation import gettext as _

from crud.actions import Action
from crud.filters import Filter
from crud.layouts import Column, Field, Sight
from crud.resource import Resource
from crud.tests.models import Category, Comment, Note, Post, Tag


class PublishedFilter(Filter):
    parameters = ['only_published']

    def name(self):
        return _('Published')

    def run(self, queryset, params):
        return queryset.filter(published=params.get('only_published') in ('1', 'true'))


class PublishPosts(Action):

    def button_label(self):
        return _('Publish')

    def handle(self, queryset):
        count = queryset.update(published=True)
        return _('%(count)d post(s) published.') % {'count': count}


class PostResource(Resource):
    model = Post

    def permission(self):
        return 'platform.posts'

    def icon(self):
        return 'file-text'

    def columns(self):
        return [
            Column('title', sortable=True),
            Column('published'),
            Column('created_at', title=_('Created'), sortable=True),
        ]

    def fields(self):
        return [
            Field('title', required=True, placeholder=_('A catchy title')),
            Field('body', input_type='textarea'),
            Field('published', input_type='checkbox'),
            Field('tags', input_type='select'),
        ]

    def legend(self):
        return [Sight('title'), Sight('body'), Sight('published')]

    def filters(self):
        return [PublishedFilter()]

    def actions(self):
        return [PublishPosts()]

    def rules(self, instance):
        return {'title': [MaxLengthValidator(40)]}

    def messages(self):
        return {'title.required': _('A post needs a title.')}

    def attributes(self):
        return {'body': _('Content')}

    def traffic_cop(self):
        return True


class DescriptionResource(PostResource):

    def description(self):
        return 'Lorem ipsum dolor sit amet, consectetur adipiscing elit.'


class NoDisplayInNavigationResource(PostResource):

    def navigation_title(self):
        return False


class TagResource(Resource):
    model = Tag

    def navigation_title(self):
        return 'Taxonomy'

    def sort(self):
        return 100

    def columns(self):
        return [Column('name', sortable=True)]

    def fields(self):
        return [Field('name', required=True)]

    def legend(self):
        return [Sight('name')]


class CommentResource(Resource):
    model = Comment

    def navigation_title(self):
        return 'Taxonomy'

    def permission(self):
        return 'platform.comments'

    def sort(self):
        return 100

    def eager_load(self):
        return ['post']

    def columns(self):
        return [Column('body'), Column('post.title', title=_('Post'))]

    def fields(self):
        return [Field('post', input_type='select', required=True), Field('body', input_type='textarea', required=True)]

    def legend(self):
        return [Sight('body'), Sight('post')]


class NoteResource(Resource):
    """Backed by a model without FilterableMixin, rejected at registration."""
    model = Note


class ModellessResource(Resource):
    pass


class CategoryResource(Resource):
    """Backed by a model filterable through the mixin only (default manager)."""
    model = Category

    def navigation_title(self):
        return False

    def columns(self):
        return [Column('name', sortable=True)]

    def fields(self):
        return [Field('name', required=True)]

    def legend(self):
        return [Sight('name')]
