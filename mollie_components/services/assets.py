"""Static Mollie Components assets shipped with the package."""

from pathlib import Path

from mollie_components.constants import COMPONENT_ASSETS

ASSETS_DIR = Path(__file__).resolve().parent.parent / "resources" / "assets"


class AssetNotFoundError(LookupError):
    """Raised for a component type or asset kind that is not shipped."""


def read_component_asset(component_type: str, kind: str) -> str:
    """Read the ``kind`` ("js" or "css") asset of a component type."""
    try:
        relative_path = COMPONENT_ASSETS[component_type][kind]
    except KeyError:
        raise AssetNotFoundError(f"No {kind} asset for component type {component_type!r}")

    return (ASSETS_DIR / relative_path).read_text(encoding="utf-8")


def strip_trailing_slash(url: str) -> str:
    """Remove a single trailing slash."""
    if url.endswith("/"):
        return url[:-1]
    return url


def render_template(template: str, replacements: dict[str, str]) -> str:
    for placeholder, value in replacements.items():
        template = template.replace(placeholder, value)
    return template
