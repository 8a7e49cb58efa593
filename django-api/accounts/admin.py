from django.contrib import admin
from django.contrib.auth.admin import UserAdmin

from accounts.models import User


@admin.register(User)
class AccountAdmin(UserAdmin):
    list_display = ["email", "name", "verification_status", "is_staff", "is_disabled"]
    list_filter = ["verification_status", "is_staff", "is_disabled"]
    search_fields = ["email", "name"]
    fieldsets = UserAdmin.fieldsets + (
        ("Verification", {"fields": ("name", "verification_status", "id_document", "is_disabled")}),
    )
