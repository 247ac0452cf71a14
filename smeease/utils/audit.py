from sqlalchemy.orm import Session
from smeease.models.log import Log


def write_log(db: Session, *, action, resource, status="SUCCESS", ip=None, meta=None):
    entry = Log(action=action, resource=resource, status=status, ip=ip, meta=meta or {})
    db.add(entry)
    db.commit()
