from typing import Optional
from starlette.concurrency import run_in_threadpool
from menucard.core.config import settings

TOKEN_URI = "https://oauth2.googleapis.com/token"

def load_vision():
    """Import the Vision SDK module"""
    try:
        from google.cloud import vision  # lazy import to allow tests without package
    except Exception as e:
        raise ImportError("google-cloud-vision package is required to run text detection") from e
    return vision

def get_vision_client():
    """Get configured Google Cloud Vision client"""
    vision = load_vision()

    # Without explicit credentials the SDK reads GOOGLE_APPLICATION_CREDENTIALS
    if not settings.GOOGLE_CLOUD_CLIENT_EMAIL or not settings.GOOGLE_CLOUD_PRIVATE_KEY:
        return vision.ImageAnnotatorClient()

    from google.oauth2 import service_account

    credentials = service_account.Credentials.from_service_account_info({
        "client_email": settings.GOOGLE_CLOUD_CLIENT_EMAIL,
        "private_key": settings.GOOGLE_CLOUD_PRIVATE_KEY,
        "project_id": settings.GOOGLE_CLOUD_PROJECT_ID,
        "token_uri": TOKEN_URI,
    })
    client_options = None
    if settings.GOOGLE_CLOUD_PROJECT_ID:
        client_options = {"quota_project_id": settings.GOOGLE_CLOUD_PROJECT_ID}
    return vision.ImageAnnotatorClient(credentials=credentials, client_options=client_options)

async def detect_text(content: bytes) -> Optional[str]:
    """
    Run text detection on raw image bytes.

    Returns the full text block (first annotation), or None when
    the image has no detectable text. Errors are not retried.
    """
    if settings.USE_MOCK:
        return await _mock_detect_text(content)

    vision = load_vision()
    client = get_vision_client()

    print(f"OCR REQUEST: {len(content)} bytes, timeout={settings.OCR_TIMEOUT_SECONDS}s")
    # Blocking SDK call, kept off the event loop
    response = await run_in_threadpool(
        client.text_detection,
        image=vision.Image(content=content),
        timeout=settings.OCR_TIMEOUT_SECONDS
    )

    if response.error and response.error.message:
        raise Exception(f"Vision API error: {response.error.message}")

    annotations = response.text_annotations
    if not annotations:
        return None

    return annotations[0].description or ""

async def _mock_detect_text(content: bytes) -> Optional[str]:
    """Mock implementation for testing without Vision API"""
    if not content:
        return None

    return (
        "STARTERS\n"
        "1. Veg Samosa ₹50\n"
        "Crispy pastry filled with spiced potatoes and peas\n"
        "2. Chicken 65 ₹180\n"
        "MAIN COURSE\n"
        "Paneer Butter Masala ₹220\n"
        "- Garlic Naan ₹60\n"
        "DESSERTS\n"
        "Gulab Jamun ₹90"
    )
