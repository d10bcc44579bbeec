"""Conversion between domain value objects and the JSON documents embedded
in the event row."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from events.domain import (
    AgendaItem,
    Capacity,
    ConfirmationCode,
    Money,
    Registration,
    RegistrationId,
    RegistrationStatus,
    Session,
    Speaker,
    TicketType,
    TicketTypeId,
)


def _dt_out(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _dt_in(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


def ticket_type_to_document(ticket_type: TicketType) -> dict[str, Any]:
    return {
        "id": str(ticket_type.id),
        "name": ticket_type.name,
        "description": ticket_type.description,
        "price": str(ticket_type.price.amount),
        "quantity": ticket_type.quantity.value,
        "sold": ticket_type.sold,
        "sale_start_date": _dt_out(ticket_type.sale_start_date),
        "sale_end_date": _dt_out(ticket_type.sale_end_date),
        "is_available": ticket_type.is_available,
    }


def ticket_type_from_document(doc: dict[str, Any]) -> TicketType:
    return TicketType(
        id=TicketTypeId.from_string(doc["id"]),
        name=doc["name"],
        description=doc.get("description", ""),
        price=Money(Decimal(doc["price"])),
        quantity=Capacity(doc["quantity"]),
        sold=doc.get("sold", 0),
        sale_start_date=_dt_in(doc.get("sale_start_date")),
        sale_end_date=_dt_in(doc.get("sale_end_date")),
        is_available=doc.get("is_available", True),
    )


def registration_to_document(registration: Registration) -> dict[str, Any]:
    return {
        "id": str(registration.id),
        "user_id": registration.user_id,
        "user_name": registration.user_name,
        "user_email": registration.user_email,
        "ticket_type_id": str(registration.ticket_type_id),
        "ticket_type_name": registration.ticket_type_name,
        "amount_paid": str(registration.amount_paid.amount),
        "status": registration.status.value,
        "registered_at": _dt_out(registration.registered_at),
        "confirmation_code": registration.confirmation_code.value,
        "session_ids": list(registration.session_ids),
        "attendee_info": dict(registration.attendee_info),
    }


def registration_from_document(doc: dict[str, Any]) -> Registration:
    return Registration(
        id=RegistrationId.from_string(doc["id"]),
        user_id=doc["user_id"],
        user_name=doc.get("user_name", ""),
        user_email=doc.get("user_email", ""),
        ticket_type_id=TicketTypeId.from_string(doc["ticket_type_id"]),
        ticket_type_name=doc.get("ticket_type_name", ""),
        amount_paid=Money(Decimal(doc["amount_paid"])),
        status=RegistrationStatus(doc["status"]),
        registered_at=_dt_in(doc["registered_at"]),
        confirmation_code=ConfirmationCode(doc["confirmation_code"]),
        session_ids=tuple(doc.get("session_ids") or ()),
        attendee_info=dict(doc.get("attendee_info") or {}),
    )


def speaker_to_document(speaker: Speaker) -> dict[str, Any]:
    return {
        "id": speaker.id,
        "name": speaker.name,
        "bio": speaker.bio,
        "photo_url": speaker.photo_url,
        "company": speaker.company,
        "job_title": speaker.job_title,
        "social_links": list(speaker.social_links),
    }


def speaker_from_document(doc: dict[str, Any]) -> Speaker:
    return Speaker(
        id=doc["id"],
        name=doc["name"],
        bio=doc.get("bio", ""),
        photo_url=doc.get("photo_url"),
        company=doc.get("company", ""),
        job_title=doc.get("job_title", ""),
        social_links=tuple(doc.get("social_links") or ()),
    )


def session_to_document(session: Session) -> dict[str, Any]:
    return {
        "id": session.id,
        "title": session.title,
        "description": session.description,
        "location": session.location,
        "start_time": _dt_out(session.start_time),
        "end_time": _dt_out(session.end_time),
        "speaker_ids": list(session.speaker_ids),
        "capacity": session.capacity,
        "session_type": session.session_type,
        "additional_info": dict(session.additional_info),
    }


def session_from_document(doc: dict[str, Any]) -> Session:
    return Session(
        id=doc["id"],
        title=doc["title"],
        description=doc.get("description", ""),
        location=doc.get("location", ""),
        start_time=_dt_in(doc.get("start_time")),
        end_time=_dt_in(doc.get("end_time")),
        speaker_ids=tuple(doc.get("speaker_ids") or ()),
        capacity=doc.get("capacity", 0),
        session_type=doc.get("session_type", ""),
        additional_info=dict(doc.get("additional_info") or {}),
    )


def agenda_item_to_document(item: AgendaItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "title": item.title,
        "description": item.description,
        "start_time": _dt_out(item.start_time),
        "end_time": _dt_out(item.end_time),
        "type": item.type,
        "sessions": [session_to_document(s) for s in item.sessions],
    }


def agenda_item_from_document(doc: dict[str, Any]) -> AgendaItem:
    return AgendaItem(
        id=doc["id"],
        title=doc["title"],
        description=doc.get("description", ""),
        start_time=_dt_in(doc.get("start_time")),
        end_time=_dt_in(doc.get("end_time")),
        type=doc.get("type", ""),
        sessions=tuple(session_from_document(s) for s in doc.get("sessions") or ()),
    )
