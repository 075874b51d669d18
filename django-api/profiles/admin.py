from django.contrib import admin

from profiles.models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ["account", "first_name", "last_name", "city", "country", "updated_at"]
    search_fields = ["account__email", "first_name", "last_name"]
    filter_horizontal = ["interested_events"]
