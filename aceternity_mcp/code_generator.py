"""
Code Snippet Module
Usage snippets for catalog components.

Only a placeholder import plus the requested customizations is produced;
component source is not fetched.
"""

import json
from typing import Optional

from .component_library import ComponentLibrary, LIBRARY


SNIPPET_TEMPLATE = '''// Component code for {name}
// Import from aceternity-ui
import {{ {name} }} from "aceternity-ui";

// Usage example with customizations:
{customizations}'''


def get_component_code(
    name,
    customizations: Optional[dict] = None,
    library: ComponentLibrary = LIBRARY,
) -> str:
    """Return the usage snippet for a component, raising if it is unknown"""
    component = library.get_component(name)
    return SNIPPET_TEMPLATE.format(
        name=component.name,
        customizations=json.dumps(customizations or {}, indent=2),
    )
