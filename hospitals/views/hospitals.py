"""
Hospital lookup endpoints.

All endpoints are read-only except the like/unlike pair.  Query and body
parameters use the camelCase names the mobile client sends.
"""
from __future__ import annotations

from dataclasses import asdict

from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from hospitals.serializers.hospital import (
    AddressQuerySerializer,
    HospitalIdQuerySerializer,
    LikeSerializer,
    TypeAddressQuerySerializer,
    UserIdQuerySerializer,
)
from hospitals.services import hospitals as svc


def _detail_payload(detail: svc.DetailHospital) -> dict:
    return {
        'hpid': detail.hpid,
        'name': detail.name,
        'phone': detail.phone,
        'address': detail.address,
        'description': detail.description,
        'likeCount': detail.like_count,
        'time': detail.time,
    }


@api_view(['GET'])
def hospital_ids(request):
    return Response({'ok': True, 'data': svc.list_hospital_ids()})


@api_view(['GET'])
def hospital_detail(request):
    q = HospitalIdQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    detail = svc.get_detail(q.validated_data['hospitalId'])
    return Response({'ok': True, 'data': _detail_payload(detail)})


@api_view(['GET'])
def hospitals_by_type(request):
    """Hospitals of one specialty in a district, one HOSPITAL_PAGE_SIZE page at a time, by name."""
    q = TypeAddressQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    page_num = q.validated_data['pageNum']
    items = svc.get_by_type_and_address(
        q.validated_data['type'], q.validated_data['address1'], q.validated_data['address2'], page_num,
    )
    return Response({'ok': True, 'data': [asdict(h) for h in items], 'pagination': {'page': page_num}})


@api_view(['GET'])
def hospitals_by_address(request):
    q = AddressQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    page_num = q.validated_data['pageNum']
    items = svc.get_by_address(q.validated_data['address1'], q.validated_data['address2'], page_num)
    return Response({'ok': True, 'data': [asdict(h) for h in items], 'pagination': {'page': page_num}})


@api_view(['GET', 'POST', 'DELETE'])
def hospital_like(request):
    """GET lists a user's liked hospitals; POST likes and DELETE unlikes."""
    if request.method == 'GET':
        q = UserIdQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        items = svc.get_liked_by_user(q.validated_data['userId'])
        return Response({'ok': True, 'data': [asdict(h) for h in items]})

    s = LikeSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    user_id, hospital_id = s.validated_data['userId'], s.validated_data['hospitalId']
    if request.method == 'POST':
        svc.like(user_id, hospital_id)
        return Response({'ok': True}, status=status.HTTP_201_CREATED)
    svc.unlike(user_id, hospital_id)
    return Response({'ok': True})


@api_view(['GET'])
def hospital_pharmacies(request):
    q = HospitalIdQuerySerializer(data=request.query_params)
    q.is_valid(raise_exception=True)
    pharmacies = svc.get_pharmacies_near(q.validated_data['hospitalId'])
    return Response({'ok': True, 'data': [asdict(p) for p in pharmacies]})
