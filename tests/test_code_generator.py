"""Tests for the placeholder usage snippet."""
import json

import pytest

from aceternity_mcp.code_generator import get_component_code
from aceternity_mcp.component_library import ComponentInfo, ComponentLibrary, ComponentNotFoundError


def test_snippet_without_customizations() -> None:
    assert get_component_code("moving-border") == (
        "// Component code for moving-border\n"
        "// Import from aceternity-ui\n"
        'import { moving-border } from "aceternity-ui";\n'
        "\n"
        "// Usage example with customizations:\n"
        "{}"
    )


def test_snippet_embeds_customizations() -> None:
    customizations = {"text": "Buy now", "borderColor": "#ff0"}
    code = get_component_code("moving-border", customizations)
    assert code.endswith(json.dumps(customizations, indent=2))


def test_unknown_component_raises() -> None:
    with pytest.raises(ComponentNotFoundError):
        get_component_code("nonexistent-xyz")


def test_snippet_from_custom_library() -> None:
    card = ComponentInfo(name="promo-card", category="Cards", description="Promo", use_case="Sales")
    library = ComponentLibrary({"promo-card": card})
    assert "import { promo-card }" in get_component_code("promo-card", library=library)
    with pytest.raises(ComponentNotFoundError):
        get_component_code("moving-border", library=library)
