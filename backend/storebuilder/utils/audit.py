from flask import g, has_request_context
from storebuilder.extensions import db
from storebuilder.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    """Stage an audit entry; the caller commits."""
    if not has_request_context():
        return
    if getattr(g, "current_store", None) is None or getattr(g, "current_user_id", None) is None:
        return  # Skip logging if user or store context is missing

    log = AuditLog()
    log.actor_id = g.current_user_id
    log.store_id = g.current_store.id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
