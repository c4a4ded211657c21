from pydantic import BaseModel
from typing import Optional, List

class RawItem(BaseModel):
    """Text fragments of one product card, as read from the rendered page."""
    title: str = ""
    price_text: str = ""
    reference_price_text: str = ""
    link: str = ""
    image_url: Optional[str] = None

class ProductDeal(BaseModel):
    title: str
    price: float
    original_price: float
    discount_rate: int
    image_url: Optional[str] = None
    product_url: str
    platform: str
    external_id: str

class ReconciliationResult(BaseModel):
    saved: List[ProductDeal] = []
    failed: List[ProductDeal] = []

class RunSummary(BaseModel):
    status: str = "success"
    total_found: int
    filtered_count: int
    saved_count: int
    data: List[ProductDeal] = []
