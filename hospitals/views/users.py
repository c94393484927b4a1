from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from hospitals.serializers.hospital import UserIdQuerySerializer
from hospitals.serializers.user import UserCreateSerializer
from hospitals.services.users import create_user, format_user, get_user


@api_view(['GET', 'POST'])
def user(request):
    """GET returns a user profile; POST registers a new user."""
    if request.method == 'GET':
        q = UserIdQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        return Response({'ok': True, 'data': format_user(get_user(q.validated_data['userId']))})

    s = UserCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    d = s.validated_data
    u = create_user(
        user_id=d.get('userId'),
        user_name=d['userName'],
        user_email=d['userEmail'],
        address1=d['address1'],
        address2=d['address2'],
    )
    return Response({'ok': True, 'data': format_user(u)}, status=status.HTTP_201_CREATED)
