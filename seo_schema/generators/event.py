"""
Event schema.

eventStatus, eventAttendanceMode and offer availability are stored as
bare codes and emitted as schema.org URIs.
"""
from seo_schema.generators.base import MappedSchemaGenerator, SchemaTypeDefinition
from seo_schema.generators.fields import FieldMapping, NestedMapping, schema_uri
from seo_schema.generators.product import AVAILABILITY_OPTIONS
from seo_schema.models import properties as p

DEFAULT_CURRENCY = "EUR"

EVENT_STATUS_OPTIONS = {
    "EventScheduled": "Scheduled",
    "EventPostponed": "Postponed",
    "EventRescheduled": "Rescheduled",
    "EventMovedOnline": "Moved online",
    "EventCancelled": "Cancelled",
}

ATTENDANCE_MODE_OPTIONS = {
    "OfflineEventAttendanceMode": "In person",
    "OnlineEventAttendanceMode": "Online",
    "MixedEventAttendanceMode": "Mixed",
}

EVENT_PROPERTIES = {
    "name": p.text("Name", "Event name", required=True),
    "description": p.textarea("Description", "Event description"),
    "image": p.image("Image", "Event image"),
    "startDate": p.date("Start date", required=True),
    "endDate": p.date("End date"),
    "eventStatus": p.select("Status", EVENT_STATUS_OPTIONS),
    "eventAttendanceMode": p.select("Attendance mode", ATTENDANCE_MODE_OPTIONS),
    "location": p.obj("Location", {
        "name": p.text("Venue name", required=True),
        "address": p.text("Address"),
    }, description="Where the event takes place", required=True),
    "organizer": p.obj("Organizer", {
        "name": p.text("Name", required=True),
        "url": p.url("URL"),
    }),
    "performer": p.obj("Performer", {
        "name": p.text("Name", required=True),
    }),
    "offers": p.obj("Offer", {
        "price": p.number("Price", required=True),
        "priceCurrency": p.text("Currency", required=True),
        "availability": p.select("Availability", AVAILABILITY_OPTIONS),
        "validFrom": p.date("On sale from"),
        "url": p.url("Ticket URL"),
    }, description="Ticket offer"),
    "url": p.url("URL", "Event URL"),
}

EVENT = SchemaTypeDefinition(
    type_name="Event",
    properties=EVENT_PROPERTIES,
    mappings=(
        FieldMapping("startDate", "_event_start_date"),
        FieldMapping("endDate", "_event_end_date"),
        FieldMapping("eventStatus", "_event_status", transform=schema_uri),
        FieldMapping("eventAttendanceMode", "_event_attendance_mode", transform=schema_uri),
        NestedMapping("location", "Place", FieldMapping("name", "_event_location_name"), (
            FieldMapping("address", "_event_location_address"),
        )),
        NestedMapping("organizer", "Organization", FieldMapping("name", "_event_organizer"), (
            FieldMapping("url", "_event_organizer_url"),
        )),
        NestedMapping("performer", "Person", FieldMapping("name", "_event_performer")),
        NestedMapping("offers", "Offer", FieldMapping("price", "_event_price"), (
            FieldMapping("priceCurrency", "_price_currency", default=DEFAULT_CURRENCY),
            FieldMapping("availability", "_event_availability", transform=schema_uri),
            FieldMapping("validFrom", "_event_valid_from"),
            FieldMapping("url", "_event_ticket_url"),
        )),
    ),
)


def event_schema() -> MappedSchemaGenerator:
    return MappedSchemaGenerator(EVENT)
