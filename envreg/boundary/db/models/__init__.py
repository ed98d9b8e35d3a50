"""
Database models package.

Exports:
  - ConversationModel: Conversation ORM model
  - MessageModel: Chat message ORM model with embedded citations
  - ComplianceReportModel: Compliance report ORM model

Dependencies: sqlalchemy, envreg.boundary.db.base
System role: Database model definitions for domain entities
"""

from envreg.boundary.db.models.conversation_model import ConversationModel
from envreg.boundary.db.models.message_model import MessageModel
from envreg.boundary.db.models.compliance_report_model import ComplianceReportModel

__all__ = [
    "ConversationModel",
    "MessageModel",
    "ComplianceReportModel",
]
