from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from hospitals.serializers.hospital import HospitalIdQuerySerializer
from hospitals.serializers.user import ReviewCreateSerializer
from hospitals.services.reviews import average_rating, create_review, list_reviews


@api_view(['GET', 'POST'])
def review(request):
    if request.method == 'GET':
        q = HospitalIdQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        hospital_id = q.validated_data['hospitalId']
        return Response({
            'ok': True,
            'data': list_reviews(hospital_id),
            'meta': {'hospitalId': hospital_id, 'rating': average_rating(hospital_id)},
        })

    s = ReviewCreateSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    d = s.validated_data
    r = create_review(d['userId'], d['hospitalId'], d['rating'], d.get('content', ''))
    return Response({'ok': True, 'reviewId': r.id}, status=status.HTTP_201_CREATED)
