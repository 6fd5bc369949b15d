import logging

from django.conf import settings
from rest_framework import mixins, viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from dispatch import Dispatcher, DispatchPolicy, NoDriverAvailable
from dispatch.policy import MAX_DELIVERY_DISTANCE, MIN_DELIVERY_DISTANCE
from drivers.models import City as CityEntity
from drivers.ranking import RankReporter
from .models import Delivery, Driver
from .repositories import DjangoDeliveryLedger, DjangoDriverDirectory
from .serializers import (
    DeliveryRequestSerializer,
    DeliverySerializer,
    DriverDistanceSerializer,
    DriverSerializer,
)

logger = logging.getLogger(__name__)


def build_dispatcher() -> Dispatcher:
    policy = DispatchPolicy(
        min_delivery_distance=getattr(settings, 'DISPATCH_MIN_DELIVERY_DISTANCE', MIN_DELIVERY_DISTANCE),
        max_delivery_distance=getattr(settings, 'DISPATCH_MAX_DELIVERY_DISTANCE', MAX_DELIVERY_DISTANCE),
    )
    policy.validate()
    return Dispatcher(DjangoDriverDirectory(), DjangoDeliveryLedger(), policy=policy)


class DriverViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Read-only driver listing plus the distance rank report.
    """
    queryset = Driver.objects.select_related('city').order_by('id')
    serializer_class = DriverSerializer

    @action(detail=False, methods=['get'])
    def rank(self, request):
        """
        Drivers ordered by total distance driven, longest first.
        Pass ?city=<name> to restrict the report to one city.
        """
        reporter = RankReporter(DjangoDriverDirectory(), DjangoDeliveryLedger())
        city_name = request.query_params.get('city')

        if city_name:
            report = reporter.rank_by_city(CityEntity(city_name))
        else:
            report = reporter.rank_all()

        return Response(DriverDistanceSerializer(report, many=True).data)


class DeliveryViewSet(mixins.CreateModelMixin,
                      mixins.ListModelMixin,
                      mixins.RetrieveModelMixin,
                      viewsets.GenericViewSet):
    """
    Deliveries are only ever created through the dispatcher; there is no update or delete.
    """
    queryset = Delivery.objects.select_related('driver', 'restaurant', 'customer').order_by('id')
    serializer_class = DeliverySerializer

    def get_serializer_class(self):
        if self.action == 'create':
            return DeliveryRequestSerializer
        return DeliverySerializer

    def create(self, request, *args, **kwargs):
        """
        Assign the least busy free driver in the restaurant's city and record the delivery.
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        customer = serializer.validated_data['customer']
        restaurant = serializer.validated_data['restaurant']
        delivery_time = serializer.validated_data['delivery_time']

        try:
            delivery = build_dispatcher().assign(customer.to_domain(), restaurant.to_domain(), delivery_time)
        except NoDriverAvailable as e:
            logger.info("Rejected delivery request for restaurant %s: %s", restaurant.id, e)
            return Response({"error": str(e)}, status=status.HTTP_409_CONFLICT)

        saved = self.get_queryset().get(pk=delivery.id)
        return Response(DeliverySerializer(saved).data, status=status.HTTP_201_CREATED)
