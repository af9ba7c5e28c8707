from django.urls import path
from . import views

app_name = 'bookings'

urlpatterns = [
    path('bookings', views.bookings_collection, name='booking_list'),                          # GET list / POST create
    path('bookings/customer/<str:customer_id>', views.customer_bookings_view, name='customer_bookings'),
    path('bookings/<int:pk>', views.booking_detail_view, name='booking_detail'),              # GET detail / DELETE cancel
    path('bookings/<int:pk>/status', views.booking_status_view, name='booking_status'),
]
