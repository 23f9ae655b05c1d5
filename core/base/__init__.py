"""
Core Base Module

Provides the model capabilities the CRUD dashboard recognises.

**Architecture:**
Each capability is a separate mixin that can be composed together.
The dashboard checks for them with ``issubclass`` so they work like
structural markers, independent of the model's concrete base.

Exports:
    Basic Utilities:
        - StatusChoices: Standard ACTIVE/INACTIVE status choices

    Individual Feature Mixins:
        - AuditMixin: Adds created_at, updated_at
        - FilterableMixin: Required by every dashboard resource model
        - SoftDeleteMixin: Adds status + soft delete / restore / force delete

    Managers & QuerySets:
        - apply_filters: query string filters for any FilterableMixin queryset
        - FilterableQuerySet / FilterableManager: filters(query_params)
        - SoftDeleteQuerySet / SoftDeleteManager: active()/inactive() + filters()

Usage Examples:

    from core.base import AuditMixin, FilterableMixin, SoftDeleteMixin
    from core.base.managers import SoftDeleteManager

    class Post(FilterableMixin, SoftDeleteMixin, AuditMixin, models.Model):
        title = models.CharField(max_length=255)
        allowed_filters = ['title']
        objects = SoftDeleteManager()
"""

# Import from local modules
from core.base.models import (
    StatusChoices,
    AuditMixin,
    FilterableMixin,
    SoftDeleteMixin,
)

from core.base.managers import (
    apply_filters,
    FilterableQuerySet,
    FilterableManager,
    SoftDeleteQuerySet,
    SoftDeleteManager,
)

__all__ = [
    # Basic Utilities
    'StatusChoices',

    # Individual Feature Mixins
    'AuditMixin',
    'FilterableMixin',
    'SoftDeleteMixin',

    # Managers & QuerySets
    'apply_filters',
    'FilterableQuerySet',
    'FilterableManager',
    'SoftDeleteQuerySet',
    'SoftDeleteManager',
]
