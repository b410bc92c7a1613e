from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

Currency = Literal["INR", "USD", "EUR", "GBP"]
DietType = Literal["veg", "non-veg", "vegan"]
Confidence = Literal["high", "medium", "low"]

class ExtractedMenuItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    price: float = Field(ge=0, description="Price as printed on the menu")
    currency: Currency = "INR"
    section: str = "Main Course"
    description: str = ""
    ingredients: str = Field(default="", description="Filled in by a later enrichment step")
    is_todays_special: bool = False
    is_unavailable: bool = False
    diet_type: Optional[DietType] = Field(None, alias="dietType")
    confidence: Confidence = "medium"

class ExtractMenuRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image: Optional[str] = Field(None, description="Base64 encoded image, data URL prefix allowed")
    restaurant_id: Optional[str] = Field(None, alias="restaurantId")
    file_type: Optional[str] = Field(None, alias="fileType", description="MIME type reported by the browser")

class ExtractMenuResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[ExtractedMenuItem] = Field(default_factory=list)
    raw_text: str = Field("", alias="rawText")
    total_detected: int = Field(0, alias="totalDetected")
    message: Optional[str] = None
    cached: bool = False

class ParseTextRequest(BaseModel):
    text: str
