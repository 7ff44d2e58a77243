
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Union
from pydantic import BaseModel, EmailStr, field_validator

class EnvelopeStatus(str, Enum):
    """Status requested when the envelope is created."""
    CREATED = "created"
    SENT = "sent"


class EnvelopeArgs(BaseModel):
    """Inputs for building a scheduled-sending envelope.

    Nothing here is validated: the remote service rejects bad emails or dates.
    """
    signer_email: str
    signer_name: str
    doc_pdf: Path
    resume_date: Union[datetime, date, str]


class ScheduleEnvelopeArgs(BaseModel):
    """Everything needed to create one envelope on an account."""
    base_path: str
    access_token: str
    account_id: str
    envelope_args: EnvelopeArgs


class ScheduleEnvelopeRequest(BaseModel):
    """Body of a request to schedule an envelope for a signer."""
    signer_email: EmailStr
    signer_name: str
    resume_date: datetime

    @field_validator('signer_name')
    @classmethod
    def name_must_not_be_empty(cls, value: str) -> str:
        """Ensure that the name is not empty."""
        if not value.strip():
            raise ValueError("Name must not be empty")
        return value.strip()


class ScheduledEnvelopeResponse(BaseModel):
    """Response model for envelope creation."""
    envelope_id: str
    status: str
    status_date_time: Optional[str] = None
    uri: Optional[str] = None

class EnvelopeStatusResponse(BaseModel):
    """Response model for an envelope lookup."""
    envelope_id: str
    status: str
    email_subject: Optional[str] = None
    created_date_time: Optional[str] = None
    sent_date_time: Optional[str] = None
