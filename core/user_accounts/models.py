"""
User Account Models
Handles user authentication and dashboard permissions.
"""
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models


class UserType(models.Model):
    """
    User type model with three types: user, admin, and super_admin.
    Admins and super admins bypass dashboard permission checks.
    """
    type_name = models.CharField(max_length=50, unique=True, db_index=True)
    description = models.TextField(blank=True, default='')

    class Meta:
        db_table = 'user_types'
        verbose_name = 'User Type'
        verbose_name_plural = 'User Types'

    def __str__(self):
        return self.type_name


class Role(models.Model):
    """
    Named bundle of dashboard permissions.

    ``permissions`` maps a permission slug to a boolean, e.g.
    {"platform.posts": true, "platform.comments": false}.
    Users inherit every slug granted by any of their roles.
    """
    slug = models.SlugField(max_length=100, unique=True)
    name = models.CharField(max_length=255)
    permissions = models.JSONField(default=dict, blank=True)

    class Meta:
        db_table = 'roles'
        ordering = ['name']

    def __str__(self):
        return self.name


class UserAccountManager(BaseUserManager):
    """
    Manager for UserAccount.
    Handles user creation with different user types and permissions.
    """

    USER_TYPE_DESCRIPTIONS = {
        'user': 'Regular user, access decided by permissions',
        'admin': 'Administrator with access to every resource',
        'super_admin': 'Super administrator with full system access'
    }

    def create_user(self, email, name, password=None, user_type_name='user', permissions=None, **extra_fields):
        """
        Create and save a user with any user type.

        Args:
            email: User's email address (used for authentication)
            name: User's full name
            password: User's password (will be hashed)
            user_type_name: Type of user ('user', 'admin', 'super_admin')
            permissions: Dict of permission slug -> bool granted directly to the user
            **extra_fields: Additional fields to set on the user

        Returns:
            UserAccount: The created user instance
        """
        if not email:
            raise ValueError('Email is required')
        if not name:
            raise ValueError('Name is required')

        email = self.normalize_email(email)

        user_type, _ = UserType.objects.get_or_create(
            type_name=user_type_name,
            defaults={'description': self.USER_TYPE_DESCRIPTIONS.get(user_type_name, '')}
        )

        user = self.model(
            email=email,
            name=name,
            user_type=user_type,
            permissions=permissions or {},
            **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, name, password=None, **extra_fields):
        """
        Create and save a super admin user.
        Required by Django for the createsuperuser management command.
        """
        return self.create_user(
            email=email,
            name=name,
            password=password,
            user_type_name='super_admin',
            **extra_fields
        )


class UserAccount(AbstractBaseUser):
    """Custom user model with email authentication and dashboard permissions"""
    email = models.EmailField(unique=True, db_index=True)
    name = models.CharField(max_length=255)

    user_type = models.ForeignKey(
        UserType,
        on_delete=models.PROTECT,
        related_name='users'
    )
    permissions = models.JSONField(
        default=dict,
        blank=True,
        help_text="Permission slug -> bool. A false value denies the slug even if a role grants it."
    )
    roles = models.ManyToManyField(Role, blank=True, related_name='users')

    objects = UserAccountManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'user_accounts'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return f"{self.name} ({self.email})"

    def is_admin(self):
        """
        Check if user is an admin or super admin.

        Returns:
            bool: True if user is admin or super admin, False otherwise
        """
        return self.user_type.type_name in ['admin', 'super_admin']

    def get_all_permissions(self):
        """
        Merge role permissions with the user's own permissions.

        The user's own entries win over role entries for the same slug.
        """
        merged = {}
        if self.pk:
            for role in self.roles.all():
                merged.update(role.permissions or {})
        merged.update(self.permissions or {})
        return merged

    def has_access(self, permission):
        """
        Check whether the user may use a dashboard permission slug.

        Args:
            permission: Slug such as 'platform.posts', or None

        Returns:
            bool: True for None, for admins, or when the slug is granted
        """
        if permission is None:
            return True
        if self.is_admin():
            return True
        return bool(self.get_all_permissions().get(permission, False))
