from fastapi import APIRouter, HTTPException, status
from menucard.schemas import ExtractMenuRequest, ExtractMenuResponse, ParseTextRequest
from menucard.services.extract import (
    ImageTooLargeError,
    decode_image_payload,
    process_extract_request,
    get_cache_stats,
)

router = APIRouter()

@router.post("/extract-menu", response_model=ExtractMenuResponse, response_model_exclude_none=True)
async def extract_menu(request: ExtractMenuRequest):
    """
    Extract menu items from a photographed menu.
    
    Accepts a base64 image, runs text detection and parses the text
    into items for review. Results are cached per image.
    """
    if not request.image:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No image provided"
        )
    
    try:
        content = decode_image_payload(request.image)
    except ImageTooLargeError as e:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=str(e)
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    
    try:
        return await process_extract_request(content)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )

@router.post("/debug-parse")
async def debug_parse(request: ParseTextRequest):
    """Debug endpoint to see how text is parsed without running OCR"""
    from menucard.parse.menu_text import parse_menu_text, split_menu_lines, is_section_header
    from menucard.parse.utils import format_price
    
    lines = split_menu_lines(request.text)
    items = parse_menu_text(request.text)
    
    return {
        "line_count": len(lines),
        "section_headers": [line for line in lines if is_section_header(line)],
        "total_detected": len(items),
        "items": [item.model_dump(by_alias=True, exclude_none=True) for item in items],
        "preview": [
            f"{item.section} | {item.name} | {format_price(item.price, item.currency)}"
            for item in items
        ]
    }

@router.get("/cache/stats")
async def cache_statistics():
    """Get cache statistics for debugging"""
    return get_cache_stats()

@router.delete("/cache/clear")
async def clear_cache():
    """Clear all cache entries"""
    try:
        from menucard.cache.db import clear_all
        clear_all()
        return {"message": "Cache cleared successfully"}
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to clear cache: {str(e)}"
        )

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Menu Card Extractor"}
