"""
Settings for running the test suite.

Adds the ``crud.tests`` app, which holds the test models, and registers its
fixture resources on the dashboard:

    python manage.py test --settings=crud_project.test_settings
"""
from crud_project.settings import *  # noqa: F401,F403
from crud_project.settings import CRUD, INSTALLED_APPS

INSTALLED_APPS = INSTALLED_APPS + ['crud.tests']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

CRUD = {
    **CRUD,
    'RESOURCES': [
        'crud.tests.fixtures.PostResource',
        'crud.tests.fixtures.DescriptionResource',
        'crud.tests.fixtures.NoDisplayInNavigationResource',
        'crud.tests.fixtures.TagResource',
        'crud.tests.fixtures.CommentResource',
        'crud.tests.fixtures.CategoryResource',
    ],
}
