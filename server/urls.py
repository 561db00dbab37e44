"""Root URL configuration.

File management endpoints are mounted at the site root:
``/upload``, ``/download/<filename>``, ``/delete/<filename>``, ``/list``.
"""

from django.urls import include, path

urlpatterns = [
    path('', include('server.apps.files.urls', namespace='files')),
]
