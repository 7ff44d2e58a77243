import base64
import logging
from docusign_esign import (
    Document,
    EnvelopeDefinition,
    EnvelopeDelayRule,
    Recipients,
    ScheduledSending,
    Signer,
    SignHere,
    Tabs,
    Workflow,
)
from scheduled_sending.models import EnvelopeArgs, EnvelopeStatus

logger = logging.getLogger(__name__)

EMAIL_SUBJECT = "Please sign this document set"
SIGNATURE_ANCHORS = ("**signature_1**", "/sn1/")


def read_document_base64(path) -> str:
    """Read a file and return its bytes as base64 text.

    Raises whatever ``open`` raises when the file is missing or unreadable.
    """
    with open(path, "rb") as f:
        return base64.b64encode(f.read()).decode("ascii")


def make_sign_here_tab(anchor_string: str) -> SignHere:
    """A sign-here tab placed by searching the documents for ``anchor_string``."""
    return SignHere(
        anchor_string=anchor_string,
        anchor_units="pixels",
        anchor_x_offset="20",
        anchor_y_offset="10",
    )


def make_scheduled_sending_workflow(resume_date) -> Workflow:
    """Workflow holding the envelope until ``resume_date``."""
    rule = EnvelopeDelayRule(resume_date=str(resume_date))
    scheduled_sending = ScheduledSending(status="pending", rules=[rule])
    return Workflow(scheduled_sending=scheduled_sending)


def make_envelope(args: EnvelopeArgs) -> EnvelopeDefinition:
    """Build an envelope with one PDF, one signer and a scheduled-sending rule.

    The document is read before anything else, so a bad path fails here and
    never reaches the API.
    """
    doc_b64 = read_document_base64(args.doc_pdf)
    logger.debug(f"Read {args.doc_pdf} for envelope to {args.signer_email}")

    # name is a display label, independent of the file name
    document = Document(
        document_base64=doc_b64,
        name="Lorem Ipsum",
        file_extension="pdf",
        document_id="1",
    )

    # equal routing orders are delivered in parallel
    signer = Signer(
        email=args.signer_email,
        name=args.signer_name,
        recipient_id="1",
        routing_order="1",
        tabs=Tabs(sign_here_tabs=[make_sign_here_tab(a) for a in SIGNATURE_ANCHORS]),
    )

    return EnvelopeDefinition(
        email_subject=EMAIL_SUBJECT,
        documents=[document],
        recipients=Recipients(signers=[signer]),
        workflow=make_scheduled_sending_workflow(args.resume_date),
        status=EnvelopeStatus.SENT.value,
    )
