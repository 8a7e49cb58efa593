from django.contrib import admin

from bookings.models import Booking, Ticket


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 0
    readonly_fields = ["id", "category_name", "price"]


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ["event_name", "user", "total_amount", "status", "created_at"]
    list_filter = ["status"]
    search_fields = ["event_name", "user__email"]
    inlines = [TicketInline]
