from django.urls import path, re_path, include
from django.contrib import admin
from django.views.decorators.csrf import csrf_exempt
from carpool_main_app.views import index, route_not_found

urlpatterns = [
    path('', index, name='index'),
    path('admin/', admin.site.urls),
    path('api/', include("carpool_main_app.urls")),
    # Unmatched API paths answer with JSON even when DEBUG is on
    re_path(r'^api/', csrf_exempt(route_not_found)),
]

handler404 = 'carpool_main_app.views.route_not_found'
handler500 = 'carpool_main_app.views.server_error'
