from django.contrib import admin
from django.urls import path, include

from common.views import health_view

urlpatterns = [
    path('health', health_view, name='health'),
    path('admin/', admin.site.urls),
    path('api/', include('vehicles.urls')),   # fleet: add / search / status
    path('api/', include('bookings.urls')),   # bookings: admission, lifecycle, history
]

handler404 = 'common.views.not_found_view'
handler500 = 'common.views.server_error_view'
