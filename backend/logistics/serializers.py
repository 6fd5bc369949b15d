from rest_framework import serializers
from .models import Customer, Delivery, Driver, Restaurant


class DriverSerializer(serializers.ModelSerializer):
    city = serializers.SlugRelatedField(slug_field='name', read_only=True)

    class Meta:
        model = Driver
        fields = ['id', 'name', 'city']


class DeliverySerializer(serializers.ModelSerializer):
    class Meta:
        model = Delivery
        fields = '__all__'
        read_only_fields = ['driver', 'distance', 'created_at']


class DeliveryRequestSerializer(serializers.Serializer):
    """
    Input of the dispatch endpoint. The driver and distance are decided by the dispatcher.
    """
    customer = serializers.PrimaryKeyRelatedField(queryset=Customer.objects.select_related('city'))
    restaurant = serializers.PrimaryKeyRelatedField(queryset=Restaurant.objects.select_related('city'))
    delivery_time = serializers.DateTimeField()


class DriverDistanceSerializer(serializers.Serializer):
    """
    Serializes drivers.models.DriverDistance rows (plain objects, not model instances).
    """
    driver_id = serializers.IntegerField(source='driver.id')
    driver = serializers.CharField(source='driver.name')
    city = serializers.CharField(source='driver.city.name')
    total_distance = serializers.FloatField()
