from rest_framework import serializers

from hospitals.models import Specialty


class HospitalIdQuerySerializer(serializers.Serializer):
    hospitalId = serializers.CharField(max_length=20)


class AddressQuerySerializer(serializers.Serializer):
    address1 = serializers.CharField(max_length=32)
    address2 = serializers.CharField(max_length=32)
    pageNum = serializers.IntegerField(min_value=1, required=False, default=1)


class TypeAddressQuerySerializer(AddressQuerySerializer):
    type = serializers.ChoiceField(choices=Specialty.choices)


class UserIdQuerySerializer(serializers.Serializer):
    userId = serializers.CharField(max_length=64)


class LikeSerializer(serializers.Serializer):
    userId = serializers.CharField(max_length=64)
    hospitalId = serializers.CharField(max_length=20)

