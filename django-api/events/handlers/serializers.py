"""Serializers for request validation and for turning domain models into
API responses."""

from decimal import Decimal

from rest_framework import serializers

from events.domain import AgendaItem, Session, Speaker, TicketTypeId
from events.services import EventDetails, RegisterForEvent, TicketTypeSpec


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for TicketType domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(source="price.amount", max_digits=10, decimal_places=2)
    quantity = serializers.IntegerField(source="quantity.value")
    sold = serializers.IntegerField()
    remaining = serializers.IntegerField(allow_null=True)
    sale_start_date = serializers.DateTimeField(allow_null=True)
    sale_end_date = serializers.DateTimeField(allow_null=True)
    is_available = serializers.BooleanField()


class RegistrationSerializer(serializers.Serializer):
    """Serializer for Registration domain model."""

    id = serializers.CharField()
    user_id = serializers.CharField()
    user_name = serializers.CharField()
    user_email = serializers.CharField()
    ticket_type_id = serializers.CharField()
    ticket_type_name = serializers.CharField()
    amount_paid = serializers.DecimalField(
        source="amount_paid.amount", max_digits=10, decimal_places=2
    )
    status = serializers.CharField(source="status.value")
    registered_at = serializers.DateTimeField()
    confirmation_code = serializers.CharField()
    session_ids = serializers.ListField(child=serializers.CharField())
    attendee_info = serializers.DictField(child=serializers.CharField())


class SpeakerSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True, default="")
    name = serializers.CharField()
    bio = serializers.CharField(required=False, allow_blank=True, default="")
    photo_url = serializers.URLField(required=False, allow_null=True, default=None)
    company = serializers.CharField(required=False, allow_blank=True, default="")
    job_title = serializers.CharField(required=False, allow_blank=True, default="")
    social_links = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )


class SessionSerializer(serializers.Serializer):
    """Serializer for agenda Session domain model."""

    id = serializers.CharField(required=False, allow_blank=True, default="")
    title = serializers.CharField()
    description = serializers.CharField(required=False, allow_blank=True, default="")
    location = serializers.CharField(required=False, allow_blank=True, default="")
    start_time = serializers.DateTimeField(required=False, allow_null=True, default=None)
    end_time = serializers.DateTimeField(required=False, allow_null=True, default=None)
    speaker_ids = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    capacity = serializers.IntegerField(required=False, min_value=0, default=0)
    session_type = serializers.CharField(required=False, allow_blank=True, default="")
    additional_info = serializers.DictField(
        child=serializers.CharField(), required=False, default=dict
    )


class AgendaItemSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True, default="")
    title = serializers.CharField()
    description = serializers.CharField(required=False, allow_blank=True, default="")
    start_time = serializers.DateTimeField(required=False, allow_null=True, default=None)
    end_time = serializers.DateTimeField(required=False, allow_null=True, default=None)
    type = serializers.CharField(required=False, allow_blank=True, default="")
    sessions = SessionSerializer(many=True, required=False, default=list)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    location = serializers.CharField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    organizer_id = serializers.CharField()
    organizer_name = serializers.CharField()
    status = serializers.CharField(source="status.value")
    category = serializers.CharField()
    image_url = serializers.CharField(allow_null=True)
    additional_info = serializers.DictField(child=serializers.CharField())
    speakers = SpeakerSerializer(many=True)
    agenda = AgendaItemSerializer(many=True)
    ticket_types = TicketTypeSerializer(many=True)
    registrations = RegistrationSerializer(many=True)
    created_at = serializers.DateTimeField(allow_null=True)
    updated_at = serializers.DateTimeField(allow_null=True)


class TicketTypeRequestSerializer(serializers.Serializer):
    id = serializers.UUIDField(required=False, allow_null=True, default=None)
    name = serializers.CharField(max_length=100)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=Decimal("0"))
    quantity = serializers.IntegerField(min_value=-1, help_text="-1 for unlimited")
    sale_start_date = serializers.DateTimeField(required=False, allow_null=True, default=None)
    sale_end_date = serializers.DateTimeField(required=False, allow_null=True, default=None)
    is_available = serializers.BooleanField(required=False, default=True)

    def validate(self, attrs):
        start, end = attrs.get("sale_start_date"), attrs.get("sale_end_date")
        if start and end and end < start:
            raise serializers.ValidationError("sale_end_date must not precede sale_start_date")
        return attrs


class EventRequestSerializer(serializers.Serializer):
    """Validates the body of event create and update requests."""

    title = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    location = serializers.CharField(required=False, allow_blank=True, default="")
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    category = serializers.CharField(required=False, allow_blank=True, default="")
    image_url = serializers.URLField(required=False, allow_null=True, default=None)
    additional_info = serializers.DictField(
        child=serializers.CharField(), required=False, default=dict
    )
    speakers = SpeakerSerializer(many=True, required=False, allow_null=True, default=None)
    agenda = AgendaItemSerializer(many=True, required=False, allow_null=True, default=None)
    ticket_types = TicketTypeRequestSerializer(
        many=True, required=False, allow_null=True, default=None
    )

    def validate(self, attrs):
        if attrs["end_date"] < attrs["start_date"]:
            raise serializers.ValidationError("end_date must not precede start_date")
        return attrs

    def to_details(self) -> EventDetails:
        data = self.validated_data
        speakers = data.get("speakers")
        agenda = data.get("agenda")
        ticket_types = data.get("ticket_types")
        return EventDetails(
            title=data["title"],
            description=data["description"],
            location=data["location"],
            start_date=data["start_date"],
            end_date=data["end_date"],
            category=data["category"],
            image_url=data["image_url"],
            additional_info=dict(data["additional_info"]),
            speakers=(
                [
                    Speaker(**{**s, "social_links": tuple(s["social_links"])})
                    for s in speakers
                ]
                if speakers is not None
                else None
            ),
            agenda=(
                [
                    AgendaItem(
                        **{
                            **item,
                            "sessions": tuple(
                                Session(**{**s, "speaker_ids": tuple(s["speaker_ids"])})
                                for s in item["sessions"]
                            ),
                        }
                    )
                    for item in agenda
                ]
                if agenda is not None
                else None
            ),
            ticket_types=(
                [
                    TicketTypeSpec(
                        **{
                            **t,
                            "id": TicketTypeId(t["id"]) if t["id"] is not None else None,
                        }
                    )
                    for t in ticket_types
                ]
                if ticket_types is not None
                else None
            ),
        )


class RegistrationRequestSerializer(serializers.Serializer):
    """Validates the body of POST /api/events/register."""

    event_id = serializers.CharField()
    ticket_type_id = serializers.CharField()
    amount_paid = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0")
    )
    session_ids = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )
    attendee_info = serializers.DictField(
        child=serializers.CharField(), required=False, default=dict
    )

    def to_command(self) -> RegisterForEvent:
        data = self.validated_data
        return RegisterForEvent(
            event_id=data["event_id"],
            ticket_type_id=data["ticket_type_id"],
            amount_paid=data["amount_paid"],
            session_ids=tuple(data["session_ids"]),
            attendee_info=dict(data["attendee_info"]),
        )


class RegistrationResultSerializer(serializers.Serializer):
    registration = RegistrationSerializer()
    event = EventSerializer()
