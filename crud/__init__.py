"""
CRUD Dashboard

Declare resources (one per model) and let the dashboard derive navigation,
permissions and list/create/view/edit endpoints for them.
"""
