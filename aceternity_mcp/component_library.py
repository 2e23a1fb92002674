"""
Aceternity UI Component Library
Read-only catalog of Aceternity UI components with lookup and suggestion helpers
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


class CatalogError(Exception):
    """Base class for catalog query errors"""


class ComponentNotFoundError(CatalogError, LookupError):
    """Raised when a component name is missing or not in the catalog"""


class InvalidArgumentError(CatalogError, ValueError):
    """Raised when a query argument is missing or has the wrong type"""


@dataclass(frozen=True)
class ComponentInfo:
    """Information about an Aceternity UI component"""
    name: str
    category: str
    description: str
    use_case: str
    params: tuple[str, ...] = ()

    def __post_init__(self):
        for field_name in ("category", "description", "use_case"):
            if not getattr(self, field_name):
                raise ValueError(f"Component '{self.name}' has an empty {field_name}")
        object.__setattr__(self, "params", tuple(self.params))

    def to_dict(self) -> dict:
        """Serialize using the wire field names"""
        return {
            "name": self.name,
            "category": self.category,
            "description": self.description,
            "useCase": self.use_case,
            "params": list(self.params),
        }


# =============================================================================
# COMPONENT DATABASE
# Order matters: listings and suggestions follow it
# =============================================================================
COMPONENT_DATABASE: list[dict] = [
    # Hero Sections
    {
        "name": "wavy-background",
        "category": "Hero Sections",
        "description": "A hero section with an animated wavy background effect",
        "use_case": "Landing pages that need a dynamic, eye-catching header",
        "params": ["title", "subtitle", "ctaText"]
    },
    {
        "name": "bento-grid",
        "category": "Hero Sections",
        "description": "A modern bento grid layout for showcasing multiple items",
        "use_case": "Feature highlights, portfolio displays, or product showcases",
        "params": ["items"]
    },
    {
        "name": "typewriter-effect",
        "category": "Hero Sections",
        "description": "Text animation that simulates typing",
        "use_case": "Dynamic text presentations or landing pages",
        "params": ["words"]
    },

    # Cards
    {
        "name": "netflix-card",
        "category": "Cards",
        "description": "Card with Netflix-style hover animation",
        "use_case": "Content previews, featured items, or portfolio pieces",
        "params": ["title", "description", "imageUrl"]
    },
    {
        "name": "animated-tooltip",
        "category": "Cards",
        "description": "Card with animated tooltip on hover",
        "use_case": "Information cards, feature explanations",
        "params": ["text", "tooltipText"]
    },

    # Navigation
    {
        "name": "sticky-header",
        "category": "Navigation",
        "description": "Header that sticks to top with scroll animations",
        "use_case": "Main website navigation",
        "params": ["logo", "menuItems"]
    },
    {
        "name": "mac-dock",
        "category": "Navigation",
        "description": "MacOS-style dock menu with hover effects",
        "use_case": "Creative navigation menus, app interfaces",
        "params": ["items"]
    },

    # Buttons
    {
        "name": "moving-border",
        "category": "Buttons",
        "description": "Button with animated moving border",
        "use_case": "Call-to-action buttons, submit buttons",
        "params": ["text", "borderColor"]
    },
    {
        "name": "sparkles-button",
        "category": "Buttons",
        "description": "Button with sparkle animation effects",
        "use_case": "Primary actions, special feature buttons",
        "params": ["text"]
    },

    # Text Effects
    {
        "name": "text-gradient",
        "category": "Text Effects",
        "description": "Text with animated gradient background",
        "use_case": "Headlines, section titles",
        "params": ["text", "gradientColors"]
    },
    {
        "name": "glowing-text",
        "category": "Text Effects",
        "description": "Text with dynamic glowing animation",
        "use_case": "Emphasis text, decorative headlines",
        "params": ["text", "glowColor"]
    },
]

COMPONENTS: Mapping[str, ComponentInfo] = MappingProxyType(
    {c["name"]: ComponentInfo(**c) for c in COMPONENT_DATABASE}
)


class ComponentLibrary:
    """Query service over a fixed component catalog"""

    def __init__(self, components: Mapping[str, ComponentInfo]):
        self.components = components

    def list_components(self, category: Optional[str] = None) -> list[ComponentInfo]:
        """List all components, or those whose category matches exactly"""
        if not category:
            return list(self.components.values())
        return [c for c in self.components.values() if c.category == category]

    def get_component(self, name) -> ComponentInfo:
        """Get a component by name"""
        if not name or not isinstance(name, str):
            raise ComponentNotFoundError("Component name is required")
        component = self.components.get(name)
        if component is None:
            raise ComponentNotFoundError(f'Component "{name}" not found')
        return component

    def suggest(self, use_case) -> list[ComponentInfo]:
        """
        Suggest components for a use case.

        A component matches when the lower-cased query is a substring of its
        description and use case joined by a space. Results keep catalog order.
        """
        if not use_case or not isinstance(use_case, str):
            raise InvalidArgumentError("Use case description is required")

        query = use_case.lower()
        return [
            c for c in self.components.values()
            if query in f"{c.description} {c.use_case}".lower()
        ]

    def get_categories(self) -> list[str]:
        """Get distinct categories in catalog order"""
        return list(dict.fromkeys(c.category for c in self.components.values()))


LIBRARY = ComponentLibrary(COMPONENTS)
