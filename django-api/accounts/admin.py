from django.contrib import admin

from accounts.models import Account


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ["email", "name", "role", "status", "created_at"]
    list_filter = ["role", "status"]
    search_fields = ["email", "name", "organization"]
    exclude = ["password"]
