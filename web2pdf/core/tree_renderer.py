"""
Component-Tree Renderer
=======================

Turns UI-component trees into HTML strings before they are sent to the
service. Rendering is an optional capability. Usable renderers are collected
from, in order,

1. a renderer registered with ``set_default_tree_renderer()``
2. the ``dominate`` library, when installed
3. objects speaking the ``__html__`` protocol, when markupsafe is installed

and each value goes to the first of them that accepts it; with none
installed nothing is available. A client may also be handed a renderer
directly, which skips resolution.
"""

import importlib.util
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from web2pdf.config.logging import get_logger
from web2pdf.core.exceptions import RendererUnavailableError, TreeRenderError

logger = get_logger(__name__)

UNAVAILABLE_MESSAGE = (
    "Component-tree rendering is not available in this environment. "
    "To render trees, install a renderer: pip install 'web2pdf[render]'. "
    "Alternatively, pass an HTML string directly instead of a tree."
)

RENDER_GUIDANCE = (
    "Make sure the rendering library is installed and the tree is a valid element."
)


class BaseTreeRenderer(ABC):
    """Abstract base class for component-tree renderers."""

    name = "base"

    @abstractmethod
    def is_available(self) -> bool:
        """Whether this renderer can be used."""
        pass

    @abstractmethod
    def is_valid_tree(self, value: Any) -> bool:
        """Whether ``value`` is a tree this renderer understands."""
        pass

    @abstractmethod
    def render_to_string(self, value: Any) -> str:
        """Render ``value`` to an HTML string."""
        pass


class UnavailableTreeRenderer(BaseTreeRenderer):
    """Stand-in used when no rendering library is present."""

    name = "unavailable"

    def is_available(self) -> bool:
        return False

    def is_valid_tree(self, value: Any) -> bool:
        return False

    def render_to_string(self, value: Any) -> str:
        raise RendererUnavailableError(UNAVAILABLE_MESSAGE)


class DominateTreeRenderer(BaseTreeRenderer):
    """Renders ``dominate`` tag trees."""

    name = "dominate"

    def __init__(self, pretty: bool = False):
        self.pretty = pretty

    def is_available(self) -> bool:
        return importlib.util.find_spec("dominate") is not None

    def is_valid_tree(self, value: Any) -> bool:
        from dominate.dom_tag import dom_tag

        return isinstance(value, dom_tag)

    def render_to_string(self, value: Any) -> str:
        return value.render(pretty=self.pretty)


class HtmlProtocolTreeRenderer(BaseTreeRenderer):
    """Renders any object implementing ``__html__`` (markupsafe, htpy, jinja2 markup).

    Available only with markupsafe installed, the library that defines the
    protocol and produces its objects.
    """

    name = "html-protocol"

    def is_available(self) -> bool:
        return importlib.util.find_spec("markupsafe") is not None

    def is_valid_tree(self, value: Any) -> bool:
        return callable(getattr(value, "__html__", None))

    def render_to_string(self, value: Any) -> str:
        return str(value.__html__())


class CompositeTreeRenderer(BaseTreeRenderer):
    """Dispatches each value to the first renderer that accepts it."""

    name = "composite"

    def __init__(self, renderers: List[BaseTreeRenderer]):
        self.renderers = list(renderers)

    def renderer_for(self, value: Any) -> Optional[BaseTreeRenderer]:
        for renderer in self.renderers:
            if renderer.is_available() and renderer.is_valid_tree(value):
                return renderer
        return None

    def is_available(self) -> bool:
        return any(renderer.is_available() for renderer in self.renderers)

    def is_valid_tree(self, value: Any) -> bool:
        return self.renderer_for(value) is not None

    def render_to_string(self, value: Any) -> str:
        renderer = self.renderer_for(value)
        if renderer is None:
            raise ValueError(f"no renderer accepts {type(value).__name__} values")
        return renderer.render_to_string(value)


_default_renderer: Optional[BaseTreeRenderer] = None


def set_default_tree_renderer(renderer: Optional[BaseTreeRenderer]) -> None:
    """Register a process-wide renderer; ``None`` clears it."""
    global _default_renderer
    _default_renderer = renderer


def resolve_tree_renderer() -> BaseTreeRenderer:
    """Collect the usable renderers, falling back to the unavailable one."""
    candidates: List[BaseTreeRenderer] = [DominateTreeRenderer(), HtmlProtocolTreeRenderer()]
    if _default_renderer is not None:
        candidates.insert(0, _default_renderer)

    available = [renderer for renderer in candidates if renderer.is_available()]
    if not available:
        return UnavailableTreeRenderer()
    if len(available) == 1:
        return available[0]
    return CompositeTreeRenderer(available)


def is_tree_value(value: Any, renderer: Optional[BaseTreeRenderer] = None) -> bool:
    """Check whether ``value`` can be rendered; never raises."""
    renderer = renderer or resolve_tree_renderer()
    if not renderer.is_available():
        return False

    try:
        return bool(renderer.is_valid_tree(value))
    except Exception as e:
        logger.debug("Tree check failed", renderer=renderer.name, error=str(e))
        return False


async def render_to_html(value: Any, renderer: Optional[BaseTreeRenderer] = None) -> str:
    """Render a component tree to HTML."""
    renderer = renderer or resolve_tree_renderer()
    if not renderer.is_available():
        raise RendererUnavailableError(UNAVAILABLE_MESSAGE)

    try:
        html = renderer.render_to_string(value)
    except Exception as e:
        raise TreeRenderError(
            f"Failed to render component tree with {renderer.name}: {e}. {RENDER_GUIDANCE}"
        ) from e

    logger.debug("Rendered component tree", renderer=renderer.name, html_length=len(html))
    return html
