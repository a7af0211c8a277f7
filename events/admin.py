from django.contrib import admin

from events.models import Event, EventCategory, PriceTier


class PriceTierInline(admin.TabularInline):
    model = PriceTier
    extra = 1


class EventCategoryInline(admin.TabularInline):
    model = EventCategory
    extra = 1


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["title", "city", "date", "created_at"]
    list_filter = ["city"]
    search_fields = ["title", "city", "formatted_address"]
    inlines = [PriceTierInline, EventCategoryInline]


@admin.register(EventCategory)
class EventCategoryAdmin(admin.ModelAdmin):
    list_display = ["name", "event"]
    list_filter = ["name"]
