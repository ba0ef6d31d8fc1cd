from pydantic import BaseModel, Field
from typing import List, Optional, Union

class Price(BaseModel):
    base_price: float = 0
    price_per_unit: float = 0
    unit: str = ""

class PriceList(BaseModel):
    students: Price
    staff: Price
    guests: Price

class Dish(BaseModel):
    name: str
    prices: PriceList
    labels: List[str] = Field(default_factory=list, description="Label codes, e.g. VEGAN")

class Day(BaseModel):
    date: str = Field(description="Date in YYYY-MM-DD format")
    dishes: List[Dish] = Field(default_factory=list)

class MealPlan(BaseModel):
    number: int = Field(description="ISO week number")
    year: int
    days: List[Day] = Field(default_factory=list, description="Index 0 is Monday")
    version: Optional[Union[str, int, float]] = None

class LabelText(BaseModel):
    DE: str = ""
    EN: str = ""

class LabelEntry(BaseModel):
    enum_name: str
    text: LabelText = Field(default_factory=LabelText)
    abbreviation: str
