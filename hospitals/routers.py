"""
URL mappings for the hospital lookup API.

Trailing slashes are omitted, matching the paths the mobile client
already calls.
"""
from django.urls import path, include

from .views import health
from .views.hospitals import (
    hospital_detail,
    hospital_ids,
    hospital_like,
    hospital_pharmacies,
    hospitals_by_address,
    hospitals_by_type,
)
from .views.reviews import review
from .views.users import user


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
    # Hospitals
    path('api/hospital/ids', hospital_ids, name='hospital_ids'),
    path('api/hospital/detail', hospital_detail, name='hospital_detail'),
    path('api/hospital/type', hospitals_by_type, name='hospitals_by_type'),
    path('api/hospital/address', hospitals_by_address, name='hospitals_by_address'),
    path('api/hospital/like', hospital_like, name='hospital_like'),
    path('api/hospital/pharmacy', hospital_pharmacies, name='hospital_pharmacies'),
    # Users and reviews
    path('api/user', user, name='user'),
    path('api/review', review, name='review'),
]
