from .color import ColorRGBA, BLACK, WHITE

__all__ = ["ColorRGBA", "BLACK", "WHITE"]
