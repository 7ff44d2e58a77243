import os
from typing import Dict, Any
from dotenv import load_dotenv

load_dotenv()

def get_docusign_config() -> Dict[str, Any]:
    """Get DocuSign configuration from environment variables."""
    return {
        "base_path": os.getenv("DOCUSIGN_BASE_PATH", "https://demo.docusign.net/restapi"),
        "access_token": os.getenv("DOCUSIGN_ACCESS_TOKEN"),
        "account_id": os.getenv("DOCUSIGN_ACCOUNT_ID"),
        "doc_pdf": os.getenv("DOCUSIGN_DOC_PDF", "demo_documents/World_Wide_Corp_lorem.pdf"),
    }
