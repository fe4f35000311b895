"""JSON representations of domain entities."""

from calshare.domain.entities import (
    Calendar,
    CalendarPermissions,
    Event,
    Organization,
    Role,
    RoleAssignment,
)


def calendar_to_dict(c: Calendar) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "owner_id": c.owner_id,
        "owner_type": str(c.owner_type),
        "color": c.color,
        "shared_owner_ids": list(c.shared_owner_ids),
        "is_public": c.is_public,
        "created_at": c.created_at.isoformat(),
    }


def event_to_dict(e: Event) -> dict:
    return {
        "id": e.id,
        "title": e.title,
        "description": e.description,
        "calendar_ids": list(e.calendar_ids),
        "starts_at": e.starts_at.isoformat(),
        "ends_at": e.ends_at.isoformat(),
        "created_by": e.created_by,
        "created_at": e.created_at.isoformat(),
    }


def grant_to_dict(g: CalendarPermissions) -> dict:
    return {
        "id": g.id,
        "calendar_id": g.calendar_id,
        "user_id": g.user_id,
        "granted_by": g.granted_by,
        "permissions": list(g.permissions),
        "created_at": g.created_at.isoformat(),
    }


def organization_to_dict(o: Organization) -> dict:
    return {
        "id": o.id,
        "name": o.name,
        "description": o.description,
        "roles": list(o.roles),
        "created_at": o.created_at.isoformat(),
    }



def role_to_dict(r: Role) -> dict:
    return {
        "id": r.id,
        "organization_id": r.organization_id,
        "name": r.name,
        "permissions": list(r.permissions),
        "description": r.description,
        "created_at": r.created_at.isoformat(),
    }


def role_assignment_to_dict(a: RoleAssignment) -> dict:
    return {
        "id": a.id,
        "organization_id": a.organization_id,
        "role_id": a.role_id,
        "user_id": a.user_id,
        "assigned_by": a.assigned_by,
        "assigned_at": a.assigned_at.isoformat(),
    }
