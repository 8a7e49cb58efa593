from django.contrib import admin

from events.models import Event, TicketCategory


class TicketCategoryInline(admin.TabularInline):
    model = TicketCategory
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["name", "venue", "category", "starts_at", "booking_deadline"]
    list_filter = ["category"]
    search_fields = ["name", "venue"]
    inlines = [TicketCategoryInline]


@admin.register(TicketCategory)
class TicketCategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "event", "price", "limit", "sold"]
    list_filter = ["event"]
