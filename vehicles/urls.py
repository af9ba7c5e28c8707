from django.urls import path
from . import views

app_name = 'vehicles'

urlpatterns = [
    path('vehicles', views.vehicles_collection, name='vehicle_list'),                 # GET list / POST add
    path('vehicles/available', views.available_vehicles_view, name='vehicle_available'),
    path('vehicles/<int:pk>', views.vehicle_detail_view, name='vehicle_detail'),
    path('vehicles/<int:pk>/status', views.vehicle_status_view, name='vehicle_status'),
]
