"""Attachment tracker: keeps the grabbed point of the object under the pointer."""
from __future__ import annotations

from tick_toss import vec
from tick_toss.types import DragSession, TossableObject
from tick_toss.vec import Vec2


def begin_drag(pointer: Vec2, obj: TossableObject) -> DragSession:
    """Pin the point under ``pointer`` to the pointer.

    The offset is measured from the object's local center, in object space,
    so it survives whatever rotation the object has at the time.
    """
    local = obj.to_local(pointer)
    w, h = obj.size
    offset = (local[0] - w / 2, local[1] - h / 2)
    return DragSession(anchor_offset=offset, anchor_point=pointer)


def update_drag(session: DragSession, pointer: Vec2, obj: TossableObject) -> None:
    session.anchor_point = pointer
    offset = vec.rotate(session.anchor_offset, obj.rotation)
    obj.position = vec.sub(pointer, offset)


def attached_point(session: DragSession, obj: TossableObject) -> Vec2:
    """Screen position of the grabbed point on the object."""
    return vec.add(obj.position, vec.rotate(session.anchor_offset, obj.rotation))
