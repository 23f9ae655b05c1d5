"""
Tests for Resource defaults, presentation elements and validation.
"""
from django.test import SimpleTestCase, TestCase
from rest_framework.exceptions import ValidationError

from core.base.models import StatusChoices
from crud.layouts import Column, Field, Sight, resolve_attribute
from crud.resource import Resource
from crud.serializers import build_serializer_class, validate_input, validate_selection
from crud.tests.fixtures import (
    CommentResource,
    DescriptionResource,
    NoDisplayInNavigationResource,
    PostResource,
    TagResource,
)
from crud.tests.models import Comment, Post, Tag


class BlogCategoryResource(Resource):
    model = Tag


class ResourceDefaultsTest(SimpleTestCase):
    """Test labels, URI keys and defaults derived from the class"""

    def test_labels_and_uri_key(self):
        resource = BlogCategoryResource()
        self.assertEqual(resource.label(), 'Blog Categories')
        self.assertEqual(resource.singular_label(), 'Blog Category')
        self.assertEqual(resource.uri_key(), 'blog-category-resources')

    def test_defaults(self):
        resource = BlogCategoryResource()
        self.assertIsNone(resource.navigation_title())
        self.assertIsNone(resource.permission())
        self.assertIsNone(resource.description())
        self.assertEqual(resource.sort(), 2000)
        self.assertEqual(resource.icon(), 'folder')
        self.assertEqual(resource.filters(), [])
        self.assertEqual(resource.actions(), [])
        self.assertEqual(resource.eager_load(), [])
        self.assertFalse(resource.traffic_cop())
        self.assertFalse(resource.soft_deletes())

    def test_presentation_must_be_implemented(self):
        resource = BlogCategoryResource()
        for method in (resource.columns, resource.fields, resource.legend):
            with self.assertRaises(NotImplementedError):
                method()

    def test_per_page_prefers_model(self):
        self.assertEqual(PostResource().per_page(), 5)
        self.assertEqual(TagResource().per_page(), 20)

    def test_soft_deletes_follows_model(self):
        self.assertTrue(PostResource().soft_deletes())
        self.assertFalse(CommentResource().soft_deletes())

    def test_subclass_overrides(self):
        self.assertEqual(DescriptionResource().description(), 'Lorem ipsum dolor sit amet, consectetur adipiscing elit.')
        self.assertIs(NoDisplayInNavigationResource().navigation_title(), False)
        self.assertEqual(NoDisplayInNavigationResource().permission(), 'platform.posts')

    def test_get_model_returns_unsaved_instance(self):
        post = PostResource().get_model()
        self.assertIsInstance(post, Post)
        self.assertIsNone(post.pk)


class ResourceMessagesTest(SimpleTestCase):
    """Test the messages shown by the dashboard screens"""

    def setUp(self):
        self.resource = PostResource()

    def test_button_and_toast_messages(self):
        self.assertEqual(self.resource.create_button_label(), 'Create Post')
        self.assertEqual(self.resource.create_toast_message(), 'The Post was created!')
        self.assertEqual(self.resource.update_button_label(), 'Update Post')
        self.assertEqual(self.resource.update_toast_message(), 'The Post was updated!')
        self.assertEqual(self.resource.delete_button_label(), 'Delete Post')
        self.assertEqual(self.resource.delete_toast_message(), 'The Post was deleted!')
        self.assertEqual(self.resource.save_button_label(), 'Save Post')
        self.assertEqual(self.resource.restore_button_label(), 'Restore Post')
        self.assertEqual(self.resource.restore_toast_message(), 'The Post was restored!')
        self.assertEqual(self.resource.force_delete_button_label(), 'Force Delete Post')

    def test_screen_messages(self):
        self.assertEqual(self.resource.actions_dropdown_label(), 'Actions')
        self.assertEqual(self.resource.list_breadcrumbs_message(), 'Posts')
        self.assertEqual(self.resource.create_breadcrumbs_message(), 'New Post')
        self.assertEqual(self.resource.edit_breadcrumbs_message(), 'Edit Post')
        self.assertEqual(self.resource.list_screen_actions_view_label(), 'View')
        self.assertEqual(self.resource.list_screen_actions_edit_label(), 'Edit')
        self.assertEqual(self.resource.view_screen_edit_button_label(), 'Edit')

    def test_traffic_cop_message_names_update_button(self):
        message = self.resource.traffic_cop_message()
        self.assertIn('Post', message)
        self.assertIn('"Update Post"', message)

    def test_empty_resource_for_action(self):
        self.assertEqual(
            self.resource.empty_resource_for_action(),
            'No "Posts" over which you can perform an action'
        )


class LayoutsTest(TestCase):
    """Test columns, fields and sights against real records"""

    @classmethod
    def setUpTestData(cls):
        cls.post = Post.objects.create(title='Hello', body='World')
        cls.comment = Comment.objects.create(post=cls.post, body='Nice')

    def test_titles(self):
        self.assertEqual(Column('created_at').title, 'Created at')
        self.assertEqual(Column('post.title').title, 'Post title')
        self.assertEqual(Sight('title', title='Heading').title, 'Heading')

    def test_values(self):
        self.assertEqual(Column('post.title').value(self.comment), 'Hello')
        self.assertEqual(Column('post__title').value(self.comment), 'Hello')
        self.assertEqual(Sight('title', render=lambda post: post.title.upper()).value(self.post), 'HELLO')
        self.assertIs(Column('trashed').value(self.post), False)

    def test_missing_link_resolves_to_none(self):
        self.assertIsNone(resolve_attribute(Comment(body='Orphan'), 'post.title'))

    def test_field_value(self):
        self.assertEqual(Field('post').value(self.comment), self.post.pk)
        self.assertEqual(Field('title').value(self.post), 'Hello')
        self.assertIsNone(Field('title').value(None))

    def test_many_to_many_field_value(self):
        tag = Tag.objects.create(name='django')
        self.post.tags.add(tag)
        self.assertEqual(Field('tags').value(self.post), [tag.pk])
        self.assertEqual(Field('tags').value(Post(title='Unsaved')), [])

    def test_field_to_dict(self):
        self.assertEqual(Field('body', input_type='textarea', required=True).to_dict(), {
            'name': 'body',
            'title': 'Body',
            'type': 'textarea',
            'required': True,
            'help_text': '',
            'placeholder': '',
        })


class ValidateInputTest(TestCase):
    """Test validation built from fields(), rules(), messages() and attributes()"""

    def setUp(self):
        self.resource = PostResource()

    def test_valid_data(self):
        data = validate_input(self.resource, {'title': 'Hello', 'published': True}, Post())
        self.assertEqual(data['title'], 'Hello')
        self.assertTrue(data['published'])

    def test_custom_required_message(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_input(self.resource, {'body': 'No title'}, Post())
        self.assertEqual(ctx.exception.detail['title'][0], 'A post needs a title.')

    def test_rules_validators(self):
        with self.assertRaises(ValidationError) as ctx:
            validate_input(self.resource, {'title': 'x' * 41}, Post())
        self.assertEqual(ctx.exception.detail['title'][0].code, 'max_length')

    def test_fields_outside_form_are_ignored(self):
        data = validate_input(self.resource, {'title': 'Hello', 'status': StatusChoices.INACTIVE}, Post())
        self.assertNotIn('status', data)

    def test_partial_update(self):
        post = Post.objects.create(title='Hello')
        data = validate_input(self.resource, {'body': 'Changed'}, post, partial=True)
        self.assertEqual(data, {'body': 'Changed'})

    def test_unique_check_excludes_instance(self):
        tag = Tag.objects.create(name='django')
        data = validate_input(TagResource(), {'name': 'django'}, tag)
        self.assertEqual(data['name'], 'django')
        with self.assertRaises(ValidationError):
            validate_input(TagResource(), {'name': 'django'}, Tag())

    def test_attributes_label_fields(self):
        serializer_fields = build_serializer_class(self.resource)().fields
        self.assertEqual(serializer_fields['body'].label, 'Content')


class ValidateSelectionTest(TestCase):
    """Test validation of the records picked for a bulk action"""

    def setUp(self):
        self.resource = PostResource()
        self.post = Post.objects.create(title='Hello')

    def test_valid_selection(self):
        self.assertEqual(validate_selection(self.resource, {'ids': [self.post.pk]}), [self.post.pk])
        self.assertEqual(validate_selection(self.resource, {'ids': [str(self.post.pk)]}), [self.post.pk])

    def test_empty_selection(self):
        self.assertEqual(validate_selection(self.resource, {}), [])
        self.assertEqual(validate_selection(self.resource, {'ids': []}), [])

    def test_invalid_selection(self):
        for ids in (self.post.pk, 'abc', ['abc'], [self.post.pk + 1000]):
            with self.assertRaises(ValidationError):
                validate_selection(self.resource, {'ids': ids})


class LifecycleTest(TestCase):
    """Test on_save/on_delete/on_restore/on_force_delete"""

    def setUp(self):
        self.resource = PostResource()

    def test_on_save_creates_and_updates(self):
        post = self.resource.get_model()
        self.resource.on_save({'title': 'Draft'}, post)
        self.assertIsNotNone(post.pk)

        self.resource.on_save({'title': 'Final'}, post)
        post.refresh_from_db()
        self.assertEqual(post.title, 'Final')

    def test_soft_delete_restore_force_delete(self):
        post = Post.objects.create(title='Hello')

        self.resource.on_delete(post)
        post.refresh_from_db()
        self.assertTrue(post.trashed())

        self.resource.on_restore(post)
        post.refresh_from_db()
        self.assertEqual(post.status, StatusChoices.ACTIVE)

        self.resource.on_force_delete(post)
        self.assertFalse(Post.objects.filter(pk=post.pk).exists())

    def test_on_save_sets_many_to_many(self):
        django = Tag.objects.create(name='django')
        python = Tag.objects.create(name='python')
        post = self.resource.get_model()

        self.resource.on_save({'title': 'Tagged', 'tags': [django, python]}, post)
        self.assertEqual(set(Post.objects.get(pk=post.pk).tags.all()), {django, python})

        self.resource.on_save({'tags': [python]}, post)
        self.assertEqual(list(post.tags.all()), [python])

    def test_on_delete_without_soft_delete(self):
        tag = Tag.objects.create(name='django')
        TagResource().on_delete(tag)
        self.assertFalse(Tag.objects.filter(name='django').exists())
