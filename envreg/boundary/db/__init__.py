"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - ConversationModel, MessageModel, ComplianceReportModel: Domain entities
  - conversation_crud, message_crud, compliance_report_crud: CRUD operation singletons

Dependencies: sqlalchemy, envreg.configs
System role: Database adapter for conversations, chat messages and compliance reports
"""

from envreg.boundary.db.base import Base, TimestampMixin, UUIDMixin
from envreg.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from envreg.boundary.db.models import (
    ComplianceReportModel,
    ConversationModel,
    MessageModel,
)
from envreg.boundary.db.CRUD import (
    BaseCRUD,
    ComplianceReportCRUD,
    ConversationCRUD,
    MessageCRUD,
    compliance_report_crud,
    conversation_crud,
    message_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "ConversationModel",
    "MessageModel",
    "ComplianceReportModel",
    # CRUD classes
    "BaseCRUD",
    "ConversationCRUD",
    "MessageCRUD",
    "ComplianceReportCRUD",
    # CRUD singletons
    "conversation_crud",
    "message_crud",
    "compliance_report_crud",
]
