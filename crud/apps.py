import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CrudConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'crud'
    verbose_name = 'CRUD Dashboard'

    def ready(self):
        """Register the resources listed in settings.CRUD['RESOURCES'] on the default site."""
        from crud.conf import crud_settings
        from crud.sites import site

        resources = crud_settings()['RESOURCES']
        if resources:
            site.register(resources)
            logger.info(f"Registered {len(resources)} dashboard resource(s)")
