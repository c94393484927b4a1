"""
Django admin registrations for the hospital lookup models.

Lets operators inspect imported hospitals and fix specialty tags or
stray likes via ``/admin/``.
"""

from django.contrib import admin

from .models import Hospital, HospitalType, Like, Review, User


class HospitalTypeInline(admin.TabularInline):
    model = HospitalType
    extra = 0


@admin.register(Hospital)
class HospitalAdmin(admin.ModelAdmin):
    list_display = ('hpid', 'duty_name', 'address1', 'address2', 'duty_tel1')
    list_filter = ('address1',)
    search_fields = ('hpid', 'duty_name', 'duty_addr')
    inlines = [HospitalTypeInline]


@admin.register(Like)
class LikeAdmin(admin.ModelAdmin):
    list_display = ('user_id', 'hospital_id', 'created_at')
    search_fields = ('user_id', 'hospital_id')


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ('id', 'hospital_id', 'user_id', 'rating', 'created_at')
    list_filter = ('rating',)
    search_fields = ('hospital_id', 'user_id')


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('user_id', 'user_name', 'user_email', 'address1', 'address2')
    search_fields = ('user_id', 'user_name', 'user_email')
