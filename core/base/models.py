from django.db import models


class StatusChoices(models.TextChoices):
    """
    Standard status choices for soft-deletable records.
    """
    ACTIVE = 'active', 'Active'
    INACTIVE = 'inactive', 'Inactive'


class AuditMixin(models.Model):
    """
    Adds creation and modification timestamps.

    Fields:
        - created_at: Timestamp when record was created
        - updated_at: Timestamp when record was last modified

    The dashboard's traffic cop compares ``updated_at`` with the moment the
    edit form was retrieved to detect concurrent edits.
    """
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when record was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when record was last modified"
    )

    class Meta:
        abstract = True

    def touch(self):
        """Bump updated_at without changing any other field."""
        self.save(update_fields=['updated_at'])


class FilterableMixin(models.Model):
    """
    Marks a model as filterable from dashboard query parameters.

    Only models carrying this mixin can back a dashboard resource.

    Class attributes:
        - allowed_filters: Field lookups accepted from the query string
          (e.g. ['title', 'author__name'])
        - allowed_sorts: Fields accepted by ?sort= (prefix with '-' for descending)
        - search_fields: Fields matched by ?search=
        - per_page: Page size of the resource list

    Usage:
        class Post(FilterableMixin, models.Model):
            allowed_filters = ['title']
            allowed_sorts = ['title', 'created_at']
            objects = FilterableManager()

        Post.objects.filters({'title': 'Hello', 'sort': '-created_at'})
    """
    allowed_filters = []
    allowed_sorts = []
    search_fields = []
    per_page = 20

    class Meta:
        abstract = True


class SoftDeleteMixin(models.Model):
    """
    Mixin for models that support soft deletion.

    Instead of permanently deleting records, they are marked as inactive.
    This preserves referential integrity and audit history.

    Fields:
        - status: StatusChoices (ACTIVE/INACTIVE)

    Methods:
        - delete(): Marks record as inactive (soft delete)
        - restore(): Sets the record back to ACTIVE
        - force_delete(): Permanently deletes the record from database
        - trashed(): True when the record is soft deleted
    """
    status = models.CharField(
        max_length=10,
        choices=StatusChoices.choices,
        default=StatusChoices.ACTIVE,
        help_text="Record status. Set to INACTIVE instead of deleting."
    )

    class Meta:
        abstract = True

    def delete(self, using=None, keep_parents=False):
        """
        Soft delete: mark as inactive instead of removing from DB.
        """
        self.status = StatusChoices.INACTIVE
        self.save(using=using, update_fields=['status'])

    def restore(self):
        """
        Restore a soft-deleted record by setting status to ACTIVE.

        Example:
            post = Post.objects.inactive().get(pk=1)
            post.restore()  # Sets status back to ACTIVE
        """
        self.status = StatusChoices.ACTIVE
        self.save(update_fields=['status'])

    def force_delete(self):
        """
        Permanently delete the record.
        """
        return super().delete()

    def trashed(self):
        return self.status == StatusChoices.INACTIVE
