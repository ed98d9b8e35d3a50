"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from envreg.boundary.db.CRUD import conversation_crud, message_crud

    conversation = await conversation_crud.get_by_id(db, conversation_id)
"""

from envreg.boundary.db.CRUD.base_crud import BaseCRUD
from envreg.boundary.db.CRUD.conversation_crud import ConversationCRUD, conversation_crud
from envreg.boundary.db.CRUD.message_crud import MessageCRUD, message_crud
from envreg.boundary.db.CRUD.compliance_report_crud import (
    ComplianceReportCRUD,
    compliance_report_crud,
)

__all__ = [
    "BaseCRUD",
    "ConversationCRUD",
    "conversation_crud",
    "MessageCRUD",
    "message_crud",
    "ComplianceReportCRUD",
    "compliance_report_crud",
]
