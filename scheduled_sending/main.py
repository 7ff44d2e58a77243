from fastapi import FastAPI, HTTPException
from docusign_esign import ApiException
import logging

from scheduled_sending.models import (
    EnvelopeArgs,
    EnvelopeStatusResponse,
    ScheduledEnvelopeResponse,
    ScheduleEnvelopeRequest,
)
from scheduled_sending.config import get_docusign_config
from scheduled_sending.services.docusign_service import DocuSignService

logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)

app = FastAPI()

# Initialize services
config = get_docusign_config()
docusign_service = DocuSignService(config)


def api_error_to_http(e: ApiException) -> HTTPException:
    """Client errors keep their status; anything else is a bad gateway."""
    status = e.status if isinstance(e.status, int) and 400 <= e.status < 500 else 502
    return HTTPException(status_code=status, detail=f"DocuSign API error: {e.reason}")


@app.post("/scheduled-envelopes", response_model=ScheduledEnvelopeResponse, status_code=201)
def create_scheduled_envelope(request: ScheduleEnvelopeRequest):
    """Create an envelope for the signer that is sent on the resume date."""
    envelope_args = EnvelopeArgs(
        signer_email=request.signer_email,
        signer_name=request.signer_name,
        doc_pdf=config["doc_pdf"],
        resume_date=request.resume_date.isoformat(),
    )

    try:
        results = docusign_service.schedule_envelope(envelope_args)
    # ConnectionError is an OSError, so it goes first
    except ConnectionError as e:
        logger.error(f"Error creating envelope: {str(e)}")
        raise HTTPException(status_code=503, detail=str(e))
    except OSError as e:
        logger.error(f"Error reading document {config['doc_pdf']}: {str(e)}")
        raise HTTPException(status_code=500, detail="Document not available")
    except ApiException as e:
        logger.error(f"Error creating envelope: {e.status} {e.reason}")
        raise api_error_to_http(e)
    except Exception as e:
        logger.error(f"Error creating envelope: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create envelope")

    return ScheduledEnvelopeResponse(
        envelope_id=results.envelope_id,
        status=results.status,
        status_date_time=results.status_date_time,
        uri=results.uri,
    )

@app.get("/envelopes/{envelope_id}", response_model=EnvelopeStatusResponse)
def get_envelope_status(envelope_id: str):
    """Get the status of an envelope."""
    try:
        envelope = docusign_service.get_envelope(envelope_id)
    except ConnectionError as e:
        logger.error(f"Error getting envelope {envelope_id}: {str(e)}")
        raise HTTPException(status_code=503, detail=str(e))
    except ApiException as e:
        logger.error(f"Error getting envelope {envelope_id}: {e.status} {e.reason}")
        raise api_error_to_http(e)
    except Exception as e:
        logger.error(f"Error getting envelope {envelope_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to get envelope status")

    return EnvelopeStatusResponse(
        envelope_id=envelope.envelope_id,
        status=envelope.status,
        email_subject=envelope.email_subject,
        created_date_time=envelope.created_date_time,
        sent_date_time=envelope.sent_date_time,
    )

@app.get("/health")
async def health_check():
    """Liveness check; does not contact DocuSign."""
    return {"status": "healthy", "service": "scheduled-sending-api"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
