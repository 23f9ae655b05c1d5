from django.conf import settings
from django.test import SimpleTestCase, override_settings

from crud.conf import DEFAULTS, crud_settings
from crud_project import settings as project_settings


class CrudSettingsTest(SimpleTestCase):
    """Test the CRUD settings layer"""

    @override_settings(CRUD={'DEFAULT_SORT': 10})
    def test_project_values_override_defaults(self):
        values = crud_settings()
        self.assertEqual(values['DEFAULT_SORT'], 10)
        self.assertEqual(values['DEFAULT_ICON'], DEFAULTS['DEFAULT_ICON'])

    def test_project_settings_register_no_fixtures(self):
        """Test the host settings ship without the test app and its resources"""
        self.assertEqual(project_settings.CRUD['RESOURCES'], [])
        self.assertNotIn('crud.tests', project_settings.INSTALLED_APPS)

    def test_test_settings_register_fixtures(self):
        self.assertIn('crud.tests', settings.INSTALLED_APPS)
        self.assertIn('crud.tests.fixtures.PostResource', settings.CRUD['RESOURCES'])
