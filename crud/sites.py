"""
The application's default resource registry.

Populated from settings.CRUD['RESOURCES'] when the app is ready and shared
by the dashboard views for the lifetime of the process:

    from crud.sites import site
    site.register([PostResource])
"""
from crud.arbitrator import Arbitrator

site = Arbitrator()
