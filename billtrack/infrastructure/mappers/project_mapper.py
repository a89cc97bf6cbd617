"""
Project mapper for converting between raw records and domain entities.

Normalization upgrades legacy shapes:

- a single merged ``status`` field is split into work and payment status;
- status and priority values written by the earlier Italian web client
  are mapped onto the current enums;
- a missing priority defaults to the configured default priority;
- missing payments become an empty history.

Normalizing an already normalized record returns an equal project.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from billtrack.config import settings
from billtrack.domain.models.base import ValidationError, new_id
from billtrack.domain.models.project import (
    Payment,
    PaymentStatus,
    Project,
    ProjectPriority,
    WorkStatus
)
from billtrack.infrastructure.mappers.base import (
    has_any,
    parse_date,
    parse_datetime,
    parse_number,
    pick
)

logger = logging.getLogger(__name__)


LEGACY_STATUS_MAP: Dict[str, Tuple[WorkStatus, PaymentStatus]] = {
    "preventivo da inviare": (WorkStatus.QUOTE_TO_SEND, PaymentStatus.TO_INVOICE),
    "preventivo inviato": (WorkStatus.QUOTE_SENT, PaymentStatus.TO_INVOICE),
    "preventivo accettato": (WorkStatus.IN_PROGRESS, PaymentStatus.TO_INVOICE),
    "progetto consegnato": (WorkStatus.DELIVERED, PaymentStatus.TO_INVOICE),
    "attesa di pagamento": (WorkStatus.DELIVERED, PaymentStatus.INVOICED),
    "pagato": (WorkStatus.DELIVERED, PaymentStatus.PAID),
    "quote_to_send": (WorkStatus.QUOTE_TO_SEND, PaymentStatus.TO_INVOICE),
    "quote_sent": (WorkStatus.QUOTE_SENT, PaymentStatus.TO_INVOICE),
    "quote_accepted": (WorkStatus.IN_PROGRESS, PaymentStatus.TO_INVOICE),
    "delivered": (WorkStatus.DELIVERED, PaymentStatus.TO_INVOICE),
    "awaiting_payment": (WorkStatus.DELIVERED, PaymentStatus.INVOICED),
    "paid": (WorkStatus.DELIVERED, PaymentStatus.PAID),
}

WORK_STATUS_ALIASES: Dict[str, WorkStatus] = {
    "preventivo da inviare": WorkStatus.QUOTE_TO_SEND,
    "preventivo inviato": WorkStatus.QUOTE_SENT,
    "in lavorazione": WorkStatus.IN_PROGRESS,
    "consegnato": WorkStatus.DELIVERED,
    "annullato": WorkStatus.CANCELLED,
}

PAYMENT_STATUS_ALIASES: Dict[str, PaymentStatus] = {
    "da fatturare": PaymentStatus.TO_INVOICE,
    "fatturato": PaymentStatus.INVOICED,
    "parzialmente pagato": PaymentStatus.PARTIALLY_PAID,
    "pagato": PaymentStatus.PAID,
}

PRIORITY_ALIASES: Dict[str, ProjectPriority] = {
    "bassa": ProjectPriority.LOW,
    "media": ProjectPriority.MEDIUM,
    "alta": ProjectPriority.HIGH,
}


def _coerce(enum_cls, aliases: Dict[str, Any], value: Any, field: str):
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip().lower()
    try:
        return enum_cls(text)
    except ValueError:
        pass
    if text in aliases:
        return aliases[text]
    raise ValidationError(f"Unknown {field} value: {value!r}", field)


class PaymentMapper:
    """Maps between Payment domain entity and raw records."""

    def to_domain(self, raw: Dict[str, Any]) -> Payment:
        if isinstance(raw, Payment):
            return raw
        return Payment(
            id=str(pick(raw, "id") or new_id()),
            amount=parse_number(pick(raw, "amount"), "amount"),
            date=parse_date(pick(raw, "date"), "date"),
            notes=pick(raw, "notes") or None,
        )

    def to_dict(self, payment: Payment) -> Dict[str, Any]:
        return {
            "id": payment.id,
            "amount": payment.amount,
            "date": payment.date.isoformat() if payment.date else None,
            "notes": payment.notes,
        }


class ProjectMapper:
    """Maps between Project domain entity and raw records."""

    def __init__(
        self,
        payment_mapper: Optional[PaymentMapper] = None,
        default_priority: Optional[ProjectPriority] = None
    ):
        self.payment_mapper = payment_mapper or PaymentMapper()
        self.default_priority = default_priority or _coerce(
            ProjectPriority, PRIORITY_ALIASES, settings.default_priority, "priority"
        )

    def split_legacy_status(self, status: Any) -> Tuple[WorkStatus, PaymentStatus]:
        """Map a merged legacy status onto work and payment status."""
        key = str(status).strip().lower()
        if key not in LEGACY_STATUS_MAP:
            logger.warning(f"Unknown legacy project status {status!r}, treating as a quote to send")
            return WorkStatus.QUOTE_TO_SEND, PaymentStatus.TO_INVOICE
        return LEGACY_STATUS_MAP[key]

    def to_domain(self, raw: Dict[str, Any]) -> Project:
        """
        Convert a raw project record into a Project, upgrading legacy shapes.
        """
        if isinstance(raw, Project):
            return raw

        project_id = pick(raw, "id")
        if not project_id:
            raise ValidationError("Project id is required", "id")

        if "status" in raw and not has_any(raw, "workStatus", "work_status"):
            logger.info(f"Migrating legacy status of project {project_id}")
            work_status, payment_status = self.split_legacy_status(raw["status"])
        else:
            work_status = _coerce(
                WorkStatus, WORK_STATUS_ALIASES,
                pick(raw, "workStatus", "work_status", default=WorkStatus.QUOTE_TO_SEND),
                "work_status"
            )
            payment_status = _coerce(
                PaymentStatus, PAYMENT_STATUS_ALIASES,
                pick(raw, "paymentStatus", "payment_status", default=PaymentStatus.TO_INVOICE),
                "payment_status"
            )

        raw_priority = pick(raw, "priority")
        priority = (
            _coerce(ProjectPriority, PRIORITY_ALIASES, raw_priority, "priority")
            if raw_priority else self.default_priority
        )

        payments = tuple(
            self.payment_mapper.to_domain(item) for item in (pick(raw, "payments") or ())
        )

        return Project(
            id=str(project_id),
            client_id=str(pick(raw, "clientId", "client_id", default="")),
            name=pick(raw, "name", default="") or "",
            value=parse_number(pick(raw, "value"), "value"),
            work_status=work_status,
            payment_status=payment_status,
            priority=priority,
            created_at=parse_datetime(pick(raw, "createdAt", "created_at"), "created_at"),
            notes=pick(raw, "notes") or None,
            paid_at=parse_datetime(pick(raw, "paidAt", "paid_at"), "paid_at"),
            payments=payments,
        )

    def to_dict(self, project: Project) -> Dict[str, Any]:
        """Convert a Project into its current raw shape."""
        return {
            "id": project.id,
            "client_id": project.client_id,
            "name": project.name,
            "value": project.value,
            "work_status": project.work_status.value,
            "payment_status": project.payment_status.value,
            "priority": project.priority.value,
            "created_at": project.created_at.isoformat() if project.created_at else None,
            "notes": project.notes,
            "paid_at": project.paid_at.isoformat() if project.paid_at else None,
            "payments": [self.payment_mapper.to_dict(p) for p in project.payments],
        }


def normalize_project(raw: Dict[str, Any]) -> Project:
    """Upgrade one raw project record to the current Project shape."""
    return ProjectMapper().to_domain(raw)
