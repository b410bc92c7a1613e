import base64
import binascii
import hashlib
import json
from typing import Dict, Any
from menucard.cache import db as cache_db
from menucard.core.config import settings
from menucard.ocr import client as ocr_client
from menucard.parse.menu_text import parse_menu_text
from menucard.schemas import ExtractMenuResponse

NO_TEXT_MESSAGE = "No text detected in image"

class ImageTooLargeError(ValueError):
    pass

def decode_image_payload(image: str) -> bytes:
    """
    Decode a base64 image sent by the browser.
    Accepts both bare base64 and 'data:image/jpeg;base64,...' URLs.
    """
    payload = image.strip()
    if payload.startswith("data:") and "," in payload:
        payload = payload.split(",", 1)[1]

    try:
        content = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("Image is not valid base64")

    if not content:
        raise ValueError("No image provided")

    if len(content) > settings.MAX_IMAGE_BYTES:
        raise ImageTooLargeError(
            f"Image is {len(content)} bytes, limit is {settings.MAX_IMAGE_BYTES} bytes"
        )

    return content

async def process_extract_request(content: bytes) -> Dict[str, Any]:
    """
    Main pipeline for menu image extraction.

    1. Purge expired cache entries
    2. Check cache by image digest
    3. If not cached: OCR -> parse -> validate -> cache
    4. Return response payload
    """
    digest = hashlib.sha256(content).hexdigest()

    cache_db.purge_old(settings.CACHE_TTL_HOURS)

    cached_payload = cache_db.get(digest)
    if cached_payload:
        try:
            cached_data = json.loads(cached_payload)
            print(f"CACHE HIT for image {digest[:12]}")
            cached_data["cached"] = True
            return cached_data
        except json.JSONDecodeError:
            print(f"CACHE CORRUPTED for image {digest[:12]}, running OCR again")

    try:
        print(f"PROCESSING image {digest[:12]} ({len(content)} bytes) - running text detection...")
        raw_text = await ocr_client.detect_text(content)

        if not raw_text:
            print(f"NO TEXT DETECTED in image {digest[:12]}")
            return ExtractMenuResponse(message=NO_TEXT_MESSAGE).model_dump(by_alias=True)

        print(f"OCR RECEIVED: {len(raw_text)} characters")
        print(f"TEXT PREVIEW: {raw_text[:500]}...")

        items = parse_menu_text(raw_text)
        print(f"EXTRACTED ITEMS: {len(items)}")

        response = ExtractMenuResponse(
            items=items,
            raw_text=raw_text,
            total_detected=len(items),
        )
        result = response.model_dump(by_alias=True)

        cache_db.set(digest, json.dumps(result, ensure_ascii=False))
        print(f"CACHED RESULT for image {digest[:12]}")

        return result

    except Exception as e:
        print(f"ERROR processing image {digest[:12]}: {str(e)}")
        raise Exception(f"Failed to process image: {str(e)}")

def get_cache_stats() -> Dict[str, Any]:
    """Get cache statistics for debugging"""
    try:
        return cache_db.get_stats()
    except Exception as e:
        return {"error": str(e)}
