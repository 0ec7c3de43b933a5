"""Line rendering: tab expansion, highlight tags, and frame composition.

``compose_frame`` is imported from ``lazyedit.render.frame`` directly; this
package only re-exports the leaf helpers.
"""

from .syntax import Highlight, tag_render
from .tabs import TAB_STOP, column_to_display, display_to_column, expand_tabs

__all__ = [
    "Highlight",
    "TAB_STOP",
    "column_to_display",
    "display_to_column",
    "expand_tabs",
    "tag_render",
]
