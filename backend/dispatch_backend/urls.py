from django.urls import path, include
from rest_framework.routers import DefaultRouter
from logistics.views import DeliveryViewSet, DriverViewSet

router = DefaultRouter()
router.register(r'drivers', DriverViewSet)
router.register(r'deliveries', DeliveryViewSet)

urlpatterns = [
    path('api/v1/', include(router.urls)),
]
