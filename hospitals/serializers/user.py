import bleach
from rest_framework import serializers


class UserCreateSerializer(serializers.Serializer):
    userId = serializers.CharField(max_length=64, required=False)
    userName = serializers.CharField(max_length=64)
    userEmail = serializers.EmailField()
    address1 = serializers.CharField(max_length=32)
    address2 = serializers.CharField(max_length=32)

    def validate_userName(self, v):
        v = bleach.clean((v or '').strip(), tags=set(), strip=True)
        if not v:
            raise serializers.ValidationError('이름을 입력해 주세요.')
        return v


class ReviewCreateSerializer(serializers.Serializer):
    userId = serializers.CharField(max_length=64)
    hospitalId = serializers.CharField(max_length=20)
    rating = serializers.IntegerField(min_value=1, max_value=5)
    content = serializers.CharField(max_length=2000, required=False, allow_blank=True)
