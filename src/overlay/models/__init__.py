"""
Overlay - Data Models

Public API: import LayerStack from overlay.models
"""

from .layer_stack import LayerStack

__all__ = ['LayerStack']
