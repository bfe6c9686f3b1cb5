from django.contrib import admin
from .models import Location, CarpoolUser, RidePost, RideInterest

# Customize admin site
admin.site.site_header = "Carpool Board Administration"
admin.site.site_title = "Carpool Board Admin"
admin.site.index_title = "Welcome to the Carpool Board Admin Panel"


@admin.register(Location)
class LocationAdmin(admin.ModelAdmin):
    list_display = ['location_id', 'location_name', 'location_type', 'created_at']
    list_filter = ['location_type']
    search_fields = ['location_name']
    ordering = ['location_name']
    list_per_page = 100


@admin.register(CarpoolUser)
class CarpoolUserAdmin(admin.ModelAdmin):
    list_display = ['user_id', 'name', 'contact_method', 'contact_info', 'created_at']
    search_fields = ['name', 'contact_info']
    ordering = ['-created_at']
    list_per_page = 50


class RideInterestInline(admin.TabularInline):
    model = RideInterest
    extra = 0
    readonly_fields = ['created_at']


@admin.register(RidePost)
class RidePostAdmin(admin.ModelAdmin):
    list_display = ['post_id', 'post_type', 'origin', 'destination', 'departure_time', 'get_user_name', 'is_active', 'created_at']
    list_filter = ['post_type', 'is_active', 'created_at']
    search_fields = ['origin__location_name', 'destination__location_name', 'user__name', 'notes']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'
    list_per_page = 50
    readonly_fields = ['created_at', 'updated_at']
    autocomplete_fields = ['origin', 'destination', 'user']
    inlines = [RideInterestInline]
    actions = ['deactivate_rides']

    def get_user_name(self, obj):
        return obj.user.name
    get_user_name.short_description = 'Posted by'
    get_user_name.admin_order_field = 'user__name'

    def deactivate_rides(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f"{count} ride(s) deactivated.")
    deactivate_rides.short_description = "Deactivate selected rides"


@admin.register(RideInterest)
class RideInterestAdmin(admin.ModelAdmin):
    list_display = ['interest_id', 'ride', 'interested_name', 'contact_method', 'contact_info', 'created_at']
    list_filter = ['contact_method', 'created_at']
    search_fields = ['interested_name', 'contact_info', 'ride__post_id']
    ordering = ['-created_at']
    list_per_page = 50
    autocomplete_fields = ['ride']
