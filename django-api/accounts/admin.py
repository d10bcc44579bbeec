from django.contrib import admin

from accounts.models import UserAccount


@admin.register(UserAccount)
class UserAccountAdmin(admin.ModelAdmin):
    list_display = ["email", "first_name", "last_name", "enabled", "created_at"]
    list_filter = ["enabled"]
    search_fields = ["email", "first_name", "last_name"]
    readonly_fields = ["notifications", "created_at", "updated_at"]
