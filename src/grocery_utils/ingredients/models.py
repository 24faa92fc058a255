import dataclasses
import enum
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple


class Category(str, enum.Enum):
    MEAT_POULTRY = "Meat & Poultry"
    SEAFOOD = "Seafood"
    DAIRY_EGGS = "Dairy & Eggs"
    PRODUCE = "Produce"
    GRAINS_PASTA = "Grains & Pasta"
    CONDIMENTS_OILS = "Condiments & Oils"
    FROZEN = "Frozen"
    BEVERAGES = "Beverages"
    SNACKS = "Snacks"
    GENERAL = "General"


class Priority(str, enum.Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclasses.dataclass(frozen=True)
class CanonicalIngredient:
    base_name: str
    aliases: FrozenSet[str]
    category: Category
    standard_unit: str
    conversion_factors: Mapping[str, float]
    average_cost: float
    shelf_life_days: int
    sub_category: Optional[str] = None
    storage_type: Optional[str] = None

    def __post_init__(self):
        # Freeze the caller's dict so the catalog stays read-only.
        object.__setattr__(
            self, "conversion_factors", MappingProxyType(dict(self.conversion_factors))
        )
        object.__setattr__(self, "aliases", frozenset(self.aliases))

    def factor_for(self, unit: str) -> Optional[float]:
        """How many of ``unit`` make one standard unit, or None if unknown."""
        if unit == self.standard_unit:
            return 1.0
        return self.conversion_factors.get(unit)


@dataclasses.dataclass(frozen=True)
class ConsolidationRule:
    canonical_name: str
    variants: Tuple[str, ...]


@dataclasses.dataclass(frozen=True)
class ParsedLine:
    quantity: float
    unit: str
    cleaned_name: str
    # Line text after the quantity and unit, qualifiers kept ("frozen peas")
    ingredient_text: str = ""


@dataclasses.dataclass
class RecipeInput:
    name: str
    ingredient_lines: List[str]
    servings: float = 1


@dataclasses.dataclass
class IngredientSource:
    recipe_name: str
    quantity: float
    unit: str
    original_text: str


@dataclasses.dataclass
class ConsolidatedEntry:
    base_ingredient: str
    total_quantity: float
    unit: str
    category: Category
    priority: Priority
    sources: List[IngredientSource]
    estimated_cost: float = 0.0
    shelf_life_days: int = 7
    canonical: Optional[CanonicalIngredient] = None

    @property
    def recipe_names(self) -> List[str]:
        """Distinct source recipe names in first-seen order."""
        return list(dict.fromkeys(source.recipe_name for source in self.sources))


@dataclasses.dataclass
class GroceryItem:
    id: str
    name: str
    quantity_display: str
    category: Category
    from_recipes: List[str]
    is_checked: bool = False
    priority: Priority = Priority.LOW
    estimated_cost: float = 0.0
    shelf_life_days: int = 7
    store_section: str = ""
    base_ingredient: Optional[str] = None
    unit: Optional[str] = None
    total_quantity: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize with the camelCase keys the meal-plan store uses."""
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity_display,
            "category": self.category.value,
            "fromRecipes": list(self.from_recipes),
            "isChecked": self.is_checked,
            "priority": self.priority.value,
            "estimatedCost": self.estimated_cost,
            "shelfLife": self.shelf_life_days,
            "storeSection": self.store_section,
            "baseIngredient": self.base_ingredient,
            "unit": self.unit,
            "totalQuantityNeeded": self.total_quantity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GroceryItem":
        """Build an item from a stored dict; unknown categories become General."""
        try:
            category = Category(data.get("category", Category.GENERAL.value))
        except ValueError:
            category = Category.GENERAL
        try:
            priority = Priority(data.get("priority", Priority.LOW.value))
        except ValueError:
            priority = Priority.LOW
        return cls(
            id=str(data["id"]),
            name=data["name"],
            quantity_display=data.get("quantity", ""),
            category=category,
            from_recipes=list(data.get("fromRecipes", [])),
            is_checked=bool(data.get("isChecked", False)),
            priority=priority,
            estimated_cost=float(data.get("estimatedCost") or 0.0),
            shelf_life_days=int(data.get("shelfLife") or 7),
            store_section=data.get("storeSection") or "",
            base_ingredient=data.get("baseIngredient"),
            unit=data.get("unit"),
            total_quantity=data.get("totalQuantityNeeded"),
        )


@dataclasses.dataclass
class GroceryListResult:
    items: List[GroceryItem]
    estimated_shopping_time_minutes: int
    estimated_total_cost: float
