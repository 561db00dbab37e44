"""URL routes for files app."""

from django.urls import path

from server.apps.files import views

app_name = 'files'

urlpatterns = [
    path('upload', views.upload_file, name='upload'),
    path('download/<path:filename>', views.download_file, name='download'),
    path('delete/<path:filename>', views.delete_file, name='delete'),
    path('list', views.list_files, name='list'),
]
