from typing import Dict

from core.entities import CategoryDef


CATEGORY_IMAGES: Dict[str, str] = {
    "Self-Love": "https://images.unsplash.com/photo-1518531933037-91b2f5f229cc?w=900&q=80",
    "Gratitude": "https://images.unsplash.com/photo-1506744038136-46273834b3fb?w=900&q=80",
    "Confidence": "https://images.unsplash.com/photo-1464822759023-fed622ff2c3b?w=900&q=80",
    "Calm": "https://images.unsplash.com/photo-1507525428034-b723cf961d3e?w=900&q=80",
    "Motivation": "https://images.unsplash.com/photo-1470071459604-3b5ec3a7fe05?w=900&q=80",
    "Positivity": "https://images.unsplash.com/photo-1490750967868-88aa4f44baee?w=900&q=80",
}


SELF_LOVE = CategoryDef(
    name="Self-Love",
    icon="Heart",
    description="Embrace who you are",
    image=CATEGORY_IMAGES["Self-Love"],
)

GRATITUDE = CategoryDef(
    name="Gratitude",
    icon="Compass",
    description="Appreciate life's gifts",
    image=CATEGORY_IMAGES["Gratitude"],
)

CONFIDENCE = CategoryDef(
    name="Confidence",
    icon="ShieldCheck",
    description="Believe in yourself",
    image=CATEGORY_IMAGES["Confidence"],
)

CALM = CategoryDef(
    name="Calm",
    icon="Waves",
    description="Find inner peace",
    image=CATEGORY_IMAGES["Calm"],
)

MOTIVATION = CategoryDef(
    name="Motivation",
    icon="TrendingUp",
    description="Fuel your drive",
    image=CATEGORY_IMAGES["Motivation"],
)

POSITIVITY = CategoryDef(
    name="Positivity",
    icon="Sparkles",
    description="Radiate good energy",
    image=CATEGORY_IMAGES["Positivity"],
)


ALL_CATEGORIES: Dict[str, CategoryDef] = {
    category.name: category
    for category in (SELF_LOVE, GRATITUDE, CONFIDENCE, CALM, MOTIVATION, POSITIVITY)
}


def category_image(category: str) -> str:
    """Stock image for a category, or an empty string for unknown ones."""
    return CATEGORY_IMAGES.get(category, "")
